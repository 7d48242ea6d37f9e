"""Concrete repository implementation backed by SQLAlchemy."""

import logging

from sqlalchemy import ColumnElement, and_, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from article_catalog.application.interfaces import ArticleRepository
from article_catalog.domain.entities import Article, ArticleFilter
from article_catalog.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Inserts, updates and deletes are each issued as a single statement, so
    uniqueness and per-record atomicity are left to the database.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model to domain entity."""
        return Article(
            code=model.code,
            name=model.name,
            pot_size=model.pot_size,
            plant_height=model.plant_height,
            product_group=model.product_group,
            colour=model.colour,
        )

    @staticmethod
    def _values(article: Article) -> dict:
        """Non-key column values for insert/update statements."""
        return {
            "name": article.name,
            "pot_size": article.pot_size,
            "plant_height": article.plant_height,
            "product_group": article.product_group,
            "colour": article.colour,
        }

    @staticmethod
    def _conditions(article_filter: ArticleFilter) -> list[ColumnElement[bool]]:
        """Translate a filter into bound SQL criteria."""
        conditions: list[ColumnElement[bool]] = []
        if article_filter.name_contains is not None:
            # autoescape makes % and _ in user input match literally
            conditions.append(
                ArticleModel.name.icontains(article_filter.name_contains, autoescape=True)
            )
        if article_filter.min_pot_size is not None:
            conditions.append(ArticleModel.pot_size >= article_filter.min_pot_size)
        if article_filter.max_pot_size is not None:
            conditions.append(ArticleModel.pot_size <= article_filter.max_pot_size)
        if article_filter.colour is not None:
            conditions.append(ArticleModel.colour == article_filter.colour)
        if article_filter.product_group is not None:
            conditions.append(ArticleModel.product_group == article_filter.product_group)
        return conditions

    async def get_by_code(self, code: str) -> Article | None:
        result = await self._session.get(ArticleModel, code)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.code)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article | None:
        stmt = insert(ArticleModel).values(code=article.code, **self._values(article))
        try:
            await self._session.execute(stmt)
        except IntegrityError:
            # The primary key decided: another row already holds this code.
            await self._session.rollback()
            logger.debug("Insert of article '%s' hit the unique constraint", article.code)
            return None
        return Article(code=article.code, **self._values(article))

    async def update(self, article: Article) -> Article | None:
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.code == article.code)
            .values(**self._values(article))
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None
        return Article(code=article.code, **self._values(article))

    async def delete(self, code: str) -> bool:
        stmt = delete(ArticleModel).where(ArticleModel.code == code)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def find(self, article_filter: ArticleFilter) -> list[Article]:
        stmt = select(ArticleModel)
        conditions = self._conditions(article_filter)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
