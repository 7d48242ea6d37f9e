"""Application service (use case) for Article operations."""

import logging

from article_catalog.application.interfaces import ArticleRepository
from article_catalog.application.schemas import ArticleCreate, ArticleUpdate
from article_catalog.application.services.article_filter_builder import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    ArticleFilterBuilder,
)
from article_catalog.application.services.article_query_executor import ArticleQueryExecutor
from article_catalog.domain.entities import Article, ArticlePage
from article_catalog.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        filter_builder: ArticleFilterBuilder | None = None,
    ):
        self._repository = repository
        self._filter_builder = filter_builder or ArticleFilterBuilder()
        self._executor = ArticleQueryExecutor(repository)

    async def get_article(self, code: str) -> Article:
        article = await self._repository.get_by_code(code)
        if article is None:
            raise EntityNotFoundError("Article", code)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            code=data.code,
            name=data.name,
            pot_size=data.pot_size,
            plant_height=data.plant_height,
            product_group=data.product_group,
            colour=data.colour,
        )
        created = await self._repository.create(article)
        if created is None:
            logger.info("Rejected duplicate article code '%s'", data.code)
            raise DuplicateEntityError("Article", "code", data.code)
        logger.info("Created article '%s'", created.code)
        return created

    async def update_article(self, code: str, data: ArticleUpdate) -> Article:
        if data.code is not None and data.code != code:
            logger.debug("Ignoring body code '%s' for article '%s'", data.code, code)
        article = Article(
            code=code,
            name=data.name,
            pot_size=data.pot_size,
            plant_height=data.plant_height,
            product_group=data.product_group,
            colour=data.colour,
        )
        updated = await self._repository.update(article)
        if updated is None:
            raise EntityNotFoundError("Article", code)
        logger.info("Updated article '%s'", code)
        return updated

    async def delete_article(self, code: str) -> bool:
        deleted = await self._repository.delete(code)
        if not deleted:
            raise EntityNotFoundError("Article", code)
        logger.info("Deleted article '%s'", code)
        return deleted

    async def search_articles(
        self,
        *,
        name: str | None = None,
        min_pot_size: int | None = None,
        max_pot_size: int | None = None,
        colour: str | None = None,
        product_group: str | None = None,
        sort_field: str | None = None,
        sort_order: str | None = None,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ArticlePage:
        """Validate the raw parameters and run the search.

        Raises a SearchValidationError subclass when a parameter is rejected.
        """
        spec = self._filter_builder.build(
            name=name,
            min_pot_size=min_pot_size,
            max_pot_size=max_pot_size,
            colour=colour,
            product_group=product_group,
            sort_field=sort_field,
            sort_order=sort_order,
            page_number=page_number,
            page_size=page_size,
        )
        return await self._executor.execute(spec)
