# storefront/schemas/filters.py
from typing import Literal

from pydantic import Field, model_validator

from storefront.schemas.common import CamelModel

SortBy = Literal["featured", "price_low", "price_high", "newest", "best_sellers"]


class FilterState(CamelModel):
    """
    Catalog filter/sort inputs. Every field defaults to "no restriction".

    - categories: exact category names (OR)
    - min_price / max_price: inclusive bounds, `None` means unbounded
    - sizes: product must offer at least one of them
    - colors: case-insensitive substrings of the product's colors (OR)
    """

    categories: list[str] = Field(default_factory=list)
    min_price: float | None = None
    max_price: float | None = None
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    in_stock_only: bool = False
    sort_by: SortBy = "featured"

    @model_validator(mode="after")
    def check_price_range(self) -> "FilterState":
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValueError("minPrice cannot be greater than maxPrice")
        return self

    @property
    def price_range(self) -> tuple[float, float]:
        low = self.min_price if self.min_price is not None else float("-inf")
        high = self.max_price if self.max_price is not None else float("inf")
        return low, high
