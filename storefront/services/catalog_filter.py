# storefront/services/catalog_filter.py
from collections.abc import Iterable
from typing import Any

from storefront.schemas.filters import FilterState, SortBy

BEST_SELLER_TAG = "best_seller"


def _price(product: Any) -> float:
    return float(product.price)


def matches_filters(product: Any, filters: FilterState) -> bool:
    """
    True when `product` passes every active filter (logical AND).

    Works on anything exposing the catalog attributes (table rows and
    ProductRead alike).
    """
    if filters.categories and product.category not in filters.categories:
        return False

    low, high = filters.price_range
    if not low <= _price(product) <= high:
        return False

    if filters.sizes:
        offered = product.sizes or []
        if not any(size in offered for size in filters.sizes):
            return False

    if filters.colors:
        offered = [c.lower() for c in product.colors or []]
        wanted = [c.lower() for c in filters.colors]
        # substring match: "blue" selects "Light Blue" and "Navy Blue"
        if not any(w in color for w in wanted for color in offered):
            return False

    if filters.in_stock_only and not product.in_stock:
        return False

    return True


def sort_products(products: Iterable[Any], sort_by: SortBy = "featured") -> list[Any]:
    """
    Order products for display. Every ordering is stable, so equal keys
    keep their catalog order.
    """
    items = list(products)

    if sort_by == "price_low":
        return sorted(items, key=_price)
    if sort_by == "price_high":
        return sorted(items, key=_price, reverse=True)
    if sort_by == "newest":
        return sorted(items, key=lambda p: p.created_at, reverse=True)
    if sort_by == "best_sellers":
        return sorted(items, key=lambda p: BEST_SELLER_TAG not in (p.tags or []))

    # featured
    return items


def apply_filters(products: Iterable[Any], filters: FilterState) -> list[Any]:
    """
    Filter, then sort, a product list.
    """
    kept = [p for p in products if matches_filters(p, filters)]
    return sort_products(kept, filters.sort_by)
