"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass

# Integer columns are 32-bit signed on every supported database.
INT_COLUMN_MIN = -(2**31)
INT_COLUMN_MAX = 2**31 - 1


@dataclass
class Article:
    """A catalog article (plant) identified by its unique, immutable code."""

    code: str
    name: str
    pot_size: int
    plant_height: int
    product_group: str
    colour: str | None = None
