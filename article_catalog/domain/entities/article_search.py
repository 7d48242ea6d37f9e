"""Domain entities for article search: filter, sort and page window."""

from dataclasses import dataclass, field
from enum import Enum

from .article import Article


class SortField(str, Enum):
    """Closed set of fields an article search may be ordered by."""

    NAME = "name"
    POT_SIZE = "potSize"
    PLANT_HEIGHT = "plantHeight"
    COLOUR = "colour"
    PRODUCT_GROUP = "productGroup"

    @classmethod
    def parse(cls, raw: str | None) -> "SortField":
        """Resolve a client-supplied name, falling back to NAME when unknown."""
        if raw:
            wanted = raw.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return cls.NAME


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> "SortDirection":
        """Only a case-insensitive "desc" selects descending order."""
        if raw is not None and raw.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclass(frozen=True)
class ArticleFilter:
    """Conjunction of optional criteria. ``None`` means the criterion is absent."""

    name_contains: str | None = None
    min_pot_size: int | None = None
    max_pot_size: int | None = None
    colour: str | None = None
    product_group: str | None = None


@dataclass(frozen=True)
class PageWindow:
    """One-based page number and page size, exposed as offset/limit."""

    page_number: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class ArticleSearchSpec:
    """Validated, immutable search request ready for execution."""

    filter: ArticleFilter
    sort_field: SortField
    sort_direction: SortDirection
    page: PageWindow


@dataclass
class ArticlePage:
    """One page of search results plus the number of matches before paging."""

    items: list[Article] = field(default_factory=list)
    total_matches: int = 0
    page_number: int = 1
    page_size: int = 0
