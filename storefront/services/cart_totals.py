# storefront/services/cart_totals.py
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from storefront.schemas.cart import CartTotals

ZERO = Decimal("0")


def calculate_totals(
    items: Iterable[Any],
    free_shipping_threshold: float = 1500,
    shipping_fee: float = 99,
    tax_rate: float = 0.18,
) -> CartTotals:
    """
    Derive cart totals from joined cart lines.

    Each line needs `quantity` and `product.price` (decimal string).

      - subtotal  = sum(price * quantity)
      - shipping  = 0 above the threshold (strictly greater), else the flat fee
      - tax       = subtotal * rate, rounded half-up to a whole currency unit
      - total     = subtotal + shipping + tax
      - itemCount = sum of quantities, not distinct lines

    An empty cart still carries the shipping fee, the same as any
    subtotal at or under the threshold.
    """
    threshold = Decimal(str(free_shipping_threshold))

    subtotal = ZERO
    item_count = 0
    for item in items:
        subtotal += Decimal(item.product.price) * item.quantity
        item_count += item.quantity

    shipping = ZERO if subtotal > threshold else Decimal(str(shipping_fee))
    tax = (subtotal * Decimal(str(tax_rate))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    total = subtotal + shipping + tax

    return CartTotals(
        item_count=item_count,
        subtotal=float(subtotal),
        shipping=float(shipping),
        tax=float(tax),
        total=float(total),
        free_shipping_remaining=float(max(ZERO, threshold - subtotal)),
    )
