"""Translates raw search parameters into a validated ArticleSearchSpec.

The builder is pure: it never touches storage, and identical inputs always
produce an identical spec or an identical rejection.
"""

import logging

from article_catalog.domain.entities import (
    INT_COLUMN_MAX,
    ArticleFilter,
    ArticleSearchSpec,
    PageWindow,
    SortDirection,
    SortField,
)
from article_catalog.domain.exceptions import (
    InvalidMaxPotSizeError,
    InvalidMinPotSizeError,
    InvalidPageNumberError,
    InvalidPageSizeError,
    InvalidPotSizeRangeError,
    PotSizeOutOfRangeError,
)

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

logger = logging.getLogger(__name__)


def _text_or_none(value: str | None) -> str | None:
    """Treat an empty query string value (``?colour=``) as absent."""
    if value is None or value == "":
        return None
    return value


class ArticleFilterBuilder:
    """Validates search input and builds the immutable search spec."""

    def __init__(self, max_page_size: int = MAX_PAGE_SIZE):
        self._max_page_size = max_page_size

    def build(
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
    ) -> ArticleSearchSpec:
        """Return a spec, or raise a SearchValidationError subclass.

        Checks run in a fixed order, so a bad page number is always reported
        first regardless of the other parameters.
        """
        if page_number < 1:
            raise InvalidPageNumberError()
        if page_size < 1 or page_size > self._max_page_size:
            raise InvalidPageSizeError(self._max_page_size)
        if min_pot_size is not None and min_pot_size < 0:
            raise InvalidMinPotSizeError()
        if max_pot_size is not None and max_pot_size < 0:
            raise InvalidMaxPotSizeError()
        for bound in (min_pot_size, max_pot_size):
            if bound is not None and bound > INT_COLUMN_MAX:
                raise PotSizeOutOfRangeError(INT_COLUMN_MAX)
        if (
            min_pot_size is not None
            and max_pot_size is not None
            and min_pot_size > max_pot_size
        ):
            raise InvalidPotSizeRangeError()

        resolved_sort = SortField.parse(sort_field)
        if sort_field and resolved_sort.value.lower() != sort_field.strip().lower():
            logger.debug("Unknown sort field %r, ordering by %s", sort_field, resolved_sort.value)

        return ArticleSearchSpec(
            filter=ArticleFilter(
                name_contains=_text_or_none(name),
                min_pot_size=min_pot_size,
                max_pot_size=max_pot_size,
                colour=_text_or_none(colour),
                product_group=_text_or_none(product_group),
            ),
            sort_field=resolved_sort,
            sort_direction=SortDirection.parse(sort_order),
            page=PageWindow(page_number=page_number, page_size=page_size),
        )
