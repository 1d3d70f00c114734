# storefront/routers/categories.py
from fastapi import APIRouter

from storefront.core.errors import failure_message
from storefront.schemas.product import CategoryCount
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryCount])
@failure_message("Failed to fetch categories")
def list_categories():
    """
    Top-level storefront categories with their display counts.

    Counts are fixed values, not derived from the live catalog.
    """
    return ProductService.list_categories()
