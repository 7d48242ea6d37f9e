"""Shared fixtures: an in-memory repository fake and an in-memory SQLite database."""

from collections.abc import AsyncIterator
from dataclasses import replace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from article_catalog.application.interfaces import ArticleRepository
from article_catalog.domain.entities import Article, ArticleFilter
from article_catalog.infrastructure.database import Base
from article_catalog.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    get_db_session,
)
from article_catalog.main import app


def _matches(article_filter: ArticleFilter, article: Article) -> bool:
    """Evaluate a filter in memory, folding case the way the SQLite store does."""
    if article_filter.name_contains is not None and (
        article_filter.name_contains.casefold() not in article.name.casefold()
    ):
        return False
    if article_filter.min_pot_size is not None and article.pot_size < article_filter.min_pot_size:
        return False
    if article_filter.max_pot_size is not None and article.pot_size > article_filter.max_pot_size:
        return False
    if article_filter.colour is not None and article.colour != article_filter.colour:
        return False
    if article_filter.product_group is not None and article.product_group != article_filter.product_group:
        return False
    return True


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing. Hands out copies only."""

    def __init__(self, articles: list[Article] | None = None):
        self._articles: dict[str, Article] = {a.code: replace(a) for a in articles or []}

    async def get_by_code(self, code: str) -> Article | None:
        article = self._articles.get(code)
        return replace(article) if article else None

    async def get_all(self) -> list[Article]:
        return [replace(self._articles[code]) for code in sorted(self._articles)]

    async def create(self, article: Article) -> Article | None:
        if article.code in self._articles:
            return None
        self._articles[article.code] = replace(article)
        return replace(article)

    async def update(self, article: Article) -> Article | None:
        if article.code not in self._articles:
            return None
        self._articles[article.code] = replace(article)
        return replace(article)

    async def delete(self, code: str) -> bool:
        return self._articles.pop(code, None) is not None

    async def find(self, article_filter: ArticleFilter) -> list[Article]:
        return [replace(a) for a in self._articles.values() if _matches(article_filter, a)]


def make_article(code: str, name: str, **overrides) -> Article:
    fields = {
        "pot_size": 12,
        "plant_height": 30,
        "product_group": "Roses",
        "colour": None,
    }
    fields.update(overrides)
    return Article(code=code, name=name, **fields)


@pytest.fixture
def catalog() -> list[Article]:
    """A small, deliberately unordered catalog."""
    return [
        make_article("T-01", "Tulip", pot_size=9, plant_height=25, product_group="Bulbs", colour="yellow"),
        make_article("R-01", "Red Rose", pot_size=14, plant_height=60, colour="red"),
        make_article("R-02", "White Rose", pot_size=17, plant_height=55, colour="white"),
        make_article("F-01", "Fern", pot_size=21, plant_height=40, product_group="Greens"),
        make_article("R-03", "rose of sharon", pot_size=12, plant_height=90, product_group="Shrubs", colour="pink"),
    ]


@pytest.fixture
def fake_repository(catalog: list[Article]) -> FakeArticleRepository:
    return FakeArticleRepository(catalog)


@pytest_asyncio.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    engine = build_engine("sqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(db_engine)


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app, with every request bound to the test database."""

    async def _test_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _test_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as http_client:
            yield http_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def repository_factory() -> type[FakeArticleRepository]:
    """The fake repository class, for tests that need their own data set."""
    return FakeArticleRepository
