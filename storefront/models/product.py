# storefront/models/product.py
from datetime import datetime, timezone

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Catalog entry.

    Created once from the seed list at startup and never updated or
    deleted afterwards.

    Prices are kept as decimal strings ("1499", "1299.50") so they
    round-trip without float drift.
    """

    __tablename__ = "products"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    sku: str = Field(
        unique=True,
        index=True,
        description="Stock-keeping unit (unique business key)",
    )

    name: str = Field(index=True)

    description: str | None = None

    category: str = Field(
        index=True,
        description="Open set, e.g. Men / Women / Kids / Accessories",
    )

    subcategory: str | None = None

    price: str = Field(description="Unit price as a decimal string")

    original_price: str | None = Field(
        default=None,
        description="Pre-discount price as a decimal string",
    )

    fabric: str | None = None
    fit: str | None = None

    colors: list[str] | None = Field(default=None, sa_column=Column(JSON))
    sizes: list[str] | None = Field(default=None, sa_column=Column(JSON))
    images: list[str] | None = Field(default=None, sa_column=Column(JSON))
    tags: list[str] | None = Field(
        default=None,
        sa_column=Column(JSON),
        description="Classification tags, e.g. best_seller / new_arrival",
    )

    in_stock: bool = Field(default=True)

    stock_count: int = Field(default=0)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
