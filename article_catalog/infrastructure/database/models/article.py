"""SQLAlchemy ORM model for the Article entity."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from article_catalog.infrastructure.database.base import Base


class ArticleModel(Base):
    """ORM model: maps to the 'articles' table.

    The primary key on ``code`` is what guarantees uniqueness under
    concurrent inserts.
    """

    __tablename__ = "articles"

    code: Mapped[str] = mapped_column(String(13), primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    pot_size: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    plant_height: Mapped[int] = mapped_column(Integer, nullable=False)
    product_group: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    colour: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<ArticleModel(code='{self.code}', name='{self.name}')>"
