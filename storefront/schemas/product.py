# storefront/schemas/product.py
from datetime import datetime
from decimal import Decimal, InvalidOperation

from pydantic import ConfigDict, field_validator

from storefront.schemas.common import CamelModel


def _check_decimal(raw: str) -> str:
    value = raw.strip()
    try:
        parsed = Decimal(value)
    except InvalidOperation:
        raise ValueError("price must be a decimal string")
    if not parsed.is_finite() or parsed < 0:
        raise ValueError("price must be a non-negative decimal")
    return value


class ProductBase(CamelModel):
    """
    Shared catalog fields.
    """

    sku: str
    name: str
    description: str | None = None
    category: str
    subcategory: str | None = None
    price: str
    original_price: str | None = None
    fabric: str | None = None
    fit: str | None = None
    colors: list[str] | None = None
    sizes: list[str] | None = None
    images: list[str] | None = None
    tags: list[str] | None = None
    in_stock: bool = True
    stock_count: int = 0


class ProductCreate(ProductBase):
    """
    Payload for inserting a catalog entry (used by the seeder).

    Prices must parse as decimals; empty optional strings are stored as null.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("sku", "name", "category")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("price")
    @classmethod
    def decimal_price(cls, v: str) -> str:
        return _check_decimal(v)

    @field_validator("original_price")
    @classmethod
    def decimal_original_price(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return _check_decimal(v)

    @field_validator("description", "subcategory", "fabric", "fit")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v


class ProductRead(ProductBase):
    """
    Product representation for clients.
    """

    id: int
    created_at: datetime


class CategoryCount(CamelModel):
    name: str
    count: int
