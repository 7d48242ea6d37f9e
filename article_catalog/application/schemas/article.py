"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

JSON payloads use camelCase (``potSize``, ``plantHeight``, ``productGroup``);
snake_case names are accepted as well.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from article_catalog.domain.entities import INT_COLUMN_MAX, INT_COLUMN_MIN


_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class ArticleFields(BaseModel):
    """Non-key article fields shared by create and update payloads."""

    name: str = Field(..., min_length=1, max_length=50, examples=["Red Rose"])
    pot_size: int = Field(..., ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX, examples=[12])
    plant_height: int = Field(..., ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX, examples=[40])
    product_group: str = Field(..., min_length=1, max_length=100, examples=["Roses"])
    colour: str | None = Field(None, max_length=100, examples=["red"])

    model_config = _CAMEL_CONFIG

    @field_validator("name", "product_group")
    @classmethod
    def check_required_text(cls, value: str) -> str:
        return _reject_blank(value)


class ArticleCreate(ArticleFields):
    """Schema for creating a new article."""

    code: str = Field(..., min_length=1, max_length=13, examples=["ROS-001"])

    @field_validator("code")
    @classmethod
    def check_required_code(cls, value: str) -> str:
        return _reject_blank(value)


class ArticleUpdate(ArticleFields):
    """Schema for replacing an article: every non-key field is required.

    A ``code`` in the body is tolerated but never changes the article's
    identity; the path parameter decides which article is updated.
    """

    code: str | None = Field(None, max_length=13)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    code: str
    name: str
    pot_size: int
    plant_height: int
    product_group: str
    colour: str | None = None

    model_config = {**_CAMEL_CONFIG, "from_attributes": True}
