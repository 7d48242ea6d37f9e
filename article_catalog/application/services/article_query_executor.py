"""Runs an ArticleSearchSpec against the article repository."""

import logging
from collections.abc import Callable
from typing import Any

from article_catalog.application.interfaces import ArticleRepository
from article_catalog.domain.entities import (
    Article,
    ArticlePage,
    ArticleSearchSpec,
    SortDirection,
    SortField,
)

logger = logging.getLogger(__name__)


def _optional_text(value: str | None) -> tuple[bool, str]:
    # Articles without a value order before any value.
    return (value is not None, value or "")


# Ties are broken by code so paging is deterministic.
SORT_KEYS: dict[SortField, Callable[[Article], Any]] = {
    SortField.NAME: lambda a: (a.name, a.code),
    SortField.POT_SIZE: lambda a: (a.pot_size, a.code),
    SortField.PLANT_HEIGHT: lambda a: (a.plant_height, a.code),
    SortField.COLOUR: lambda a: (_optional_text(a.colour), a.code),
    SortField.PRODUCT_GROUP: lambda a: (a.product_group, a.code),
}


class ArticleQueryExecutor:
    """Filters, sorts and pages articles for a validated search spec."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def execute(self, spec: ArticleSearchSpec) -> ArticlePage:
        matches = await self._repository.find(spec.filter)
        ordered = sorted(
            matches,
            key=SORT_KEYS[spec.sort_field],
            reverse=spec.sort_direction is SortDirection.DESC,
        )
        window = spec.page
        items = ordered[window.offset : window.offset + window.limit]

        logger.debug(
            "Article search: %d matches, returning %d (page=%d, size=%d, sort=%s %s)",
            len(ordered),
            len(items),
            window.page_number,
            window.page_size,
            spec.sort_field.value,
            spec.sort_direction.value,
        )
        return ArticlePage(
            items=items,
            total_matches=len(ordered),
            page_number=window.page_number,
            page_size=window.page_size,
        )
