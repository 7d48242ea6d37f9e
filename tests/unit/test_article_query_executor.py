"""Unit tests for the ArticleQueryExecutor: filtering, ordering and paging."""

import pytest

from article_catalog.application.services import ArticleFilterBuilder, ArticleQueryExecutor
from article_catalog.application.services.article_query_executor import SORT_KEYS
from article_catalog.domain.entities import Article, SortField


@pytest.fixture
def executor(fake_repository) -> ArticleQueryExecutor:
    return ArticleQueryExecutor(fake_repository)


async def _search(executor: ArticleQueryExecutor, **params):
    spec = ArticleFilterBuilder().build(**params)
    return await executor.execute(spec)


def _codes(page) -> list[str]:
    return [a.code for a in page.items]


def test_every_sort_field_has_a_key():
    assert set(SORT_KEYS) == set(SortField)


@pytest.mark.asyncio
async def test_name_is_a_case_insensitive_substring(executor: ArticleQueryExecutor):
    page = await _search(executor, name="rose")
    names = {a.name for a in page.items}
    assert names == {"Red Rose", "White Rose", "rose of sharon"}
    assert "Tulip" not in names


@pytest.mark.asyncio
async def test_default_order_is_name_ascending(executor: ArticleQueryExecutor):
    page = await _search(executor)
    assert [a.name for a in page.items] == [
        "Fern",
        "Red Rose",
        "Tulip",
        "White Rose",
        "rose of sharon",
    ]


@pytest.mark.asyncio
async def test_unknown_sort_field_orders_by_name(executor: ArticleQueryExecutor):
    default = await _search(executor)
    bogus = await _search(executor, sort_field="bogusField")
    assert _codes(bogus) == _codes(default)


@pytest.mark.asyncio
async def test_sort_by_pot_size_descending(executor: ArticleQueryExecutor):
    page = await _search(executor, sort_field="potSize", sort_order="desc")
    assert [a.pot_size for a in page.items] == [21, 17, 14, 12, 9]


@pytest.mark.asyncio
async def test_missing_colour_sorts_first_ascending(executor: ArticleQueryExecutor):
    page = await _search(executor, sort_field="colour")
    assert [a.colour for a in page.items] == [None, "pink", "red", "white", "yellow"]

    page = await _search(executor, sort_field="colour", sort_order="DESC")
    assert [a.colour for a in page.items] == ["yellow", "white", "red", "pink", None]


@pytest.mark.asyncio
async def test_ties_are_ordered_by_code(repository_factory):
    repository = repository_factory(
        [
            Article(code=code, name="Same", pot_size=10, plant_height=10, product_group="G")
            for code in ("C", "A", "B")
        ]
    )
    page = await ArticleQueryExecutor(repository).execute(
        ArticleFilterBuilder().build(sort_field="potSize")
    )
    assert _codes(page) == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_pot_size_bounds_are_inclusive(executor: ArticleQueryExecutor):
    page = await _search(executor, min_pot_size=12, max_pot_size=17, sort_field="potSize")
    assert _codes(page) == ["R-03", "R-01", "R-02"]


@pytest.mark.asyncio
async def test_colour_and_product_group_are_exact(executor: ArticleQueryExecutor):
    assert _codes(await _search(executor, colour="Red")) == []
    assert _codes(await _search(executor, colour="red")) == ["R-01"]
    assert _codes(await _search(executor, product_group="Roses")) == ["R-01", "R-02"]
    assert _codes(await _search(executor, product_group="roses")) == []


@pytest.mark.asyncio
async def test_filters_are_combined_with_and(executor: ArticleQueryExecutor):
    page = await _search(executor, name="rose", colour="red", max_pot_size=20)
    assert _codes(page) == ["R-01"]


@pytest.mark.asyncio
async def test_pages_walk_the_ordered_matches(executor: ArticleQueryExecutor):
    pages = [
        await _search(executor, page_number=n, page_size=2) for n in (1, 2, 3, 4)
    ]
    assert [_codes(p) for p in pages] == [
        ["F-01", "R-01"],
        ["T-01", "R-02"],
        ["R-03"],
        [],
    ]
    assert all(p.total_matches == 5 for p in pages)
    assert pages[1].page_number == 2
    assert pages[1].page_size == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("page_size", [1, 2, 3, 10, 100])
async def test_page_never_exceeds_page_size(executor: ArticleQueryExecutor, page_size: int):
    page = await _search(executor, page_size=page_size)
    assert len(page.items) <= page_size


@pytest.mark.asyncio
async def test_no_matches_is_an_empty_page(executor: ArticleQueryExecutor):
    page = await _search(executor, name="cactus")
    assert page.items == []
    assert page.total_matches == 0
