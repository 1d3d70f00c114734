# storefront/models/cart.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class CartItem(SQLModel, table=True):
    """
    Shopping cart line for an anonymous session.

    One session cannot have 2 rows for the same
    (product_id, selected_color, selected_size) combination;
    adding the same combination again increments `quantity`.

    `product_id` is a weak reference: the product is joined when the
    cart is read, and lines whose product no longer resolves are dropped.
    """

    __tablename__ = "cart_items"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    product_id: int | None = Field(
        default=None,
        foreign_key="products.id",
        index=True,
    )

    quantity: int = Field(
        default=1,
        description="Must be >= 1",
    )

    selected_color: str | None = None
    selected_size: str | None = None

    session_id: str = Field(
        index=True,
        description="Opaque client identifier owning the cart",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
