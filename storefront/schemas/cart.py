# storefront/schemas/cart.py
from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from storefront.schemas.common import CamelModel
from storefront.schemas.product import ProductRead


class CartItemCreate(CamelModel):
    """
    Payload for adding to cart.

    The owning session comes from the `session-id` header, never the body;
    unknown keys (a client-sent `sessionId`, for one) are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    product_id: int | None = None
    selected_color: str | None = None
    selected_size: str | None = None
    quantity: int = Field(default=1, ge=1)


class CartItemUpdate(CamelModel):
    """
    Partial update of a cart line.

    `quantity <= 0` removes the line. The field may be omitted but not
    sent as null. Unknown keys are dropped, as on create.
    """

    model_config = ConfigDict(extra="ignore")

    quantity: int | None = None
    selected_color: str | None = None
    selected_size: str | None = None

    @field_validator("quantity")
    @classmethod
    def quantity_not_null(cls, v: int | None) -> int:
        if v is None:
            raise ValueError("quantity cannot be null")
        return v


class CartItemRead(CamelModel):
    """
    Read model for a single cart line.
    """

    id: int
    product_id: int | None
    quantity: int
    selected_color: str | None = None
    selected_size: str | None = None
    session_id: str
    created_at: datetime


class CartItemWithProduct(CartItemRead):
    """
    Cart line joined to its product.
    """

    product: ProductRead


class CartTotals(CamelModel):
    """
    Derived cart values. Never stored.
    """

    item_count: int
    subtotal: float
    shipping: float
    tax: float
    total: float
    free_shipping_remaining: float


class CartSummary(CartTotals):
    """
    Full cart response model with totals.
    """

    items: list[CartItemWithProduct]
