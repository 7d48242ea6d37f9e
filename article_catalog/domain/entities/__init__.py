from .article import INT_COLUMN_MAX, INT_COLUMN_MIN, Article
from .article_search import (
    ArticleFilter,
    ArticlePage,
    ArticleSearchSpec,
    PageWindow,
    SortDirection,
    SortField,
)

__all__ = [
    "INT_COLUMN_MAX",
    "INT_COLUMN_MIN",
    "Article",
    "ArticleFilter",
    "ArticlePage",
    "ArticleSearchSpec",
    "PageWindow",
    "SortDirection",
    "SortField",
]
