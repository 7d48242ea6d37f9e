"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from article_catalog.domain.entities import Article, ArticleFilter


class ArticleRepository(ABC):
    """Port for article persistence: implemented in the infrastructure layer.

    Not-found and duplicate-code outcomes are reported through return values;
    only storage failures raise.
    """

    @abstractmethod
    async def get_by_code(self, code: str) -> Article | None:
        """Retrieve a single article by its code."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, unpaginated."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article | None:
        """Insert a new article atomically.

        Returns the stored article, or None when an article with the same
        code already exists.
        """
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article | None:
        """Replace all non-key fields. Returns None if the code is unknown."""
        ...

    @abstractmethod
    async def delete(self, code: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def find(self, article_filter: ArticleFilter) -> list[Article]:
        """Return every article matching the filter, unsorted and unpaged."""
        ...
