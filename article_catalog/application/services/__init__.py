from .article_filter_builder import ArticleFilterBuilder
from .article_query_executor import ArticleQueryExecutor
from .article_service import ArticleService

__all__ = [
    "ArticleFilterBuilder",
    "ArticleQueryExecutor",
    "ArticleService",
]
