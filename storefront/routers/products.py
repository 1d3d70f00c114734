# storefront/routers/products.py
from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlmodel import Session

from storefront.core.errors import failure_message
from storefront.database import get_session
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.common import ErrorResponse
from storefront.schemas.filters import FilterState, SortBy
from storefront.schemas.product import ProductRead
from storefront.services.export_service import CSV_FILENAME, ExportService
from storefront.services.product_service import ProductService

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

repo = ProductRepository()
service = ProductService(repo)
exporter = ExportService(repo)


def get_filter_state(
    categories: list[str] = Query(default=[]),
    min_price: float | None = Query(default=None, alias="minPrice", ge=0),
    max_price: float | None = Query(default=None, alias="maxPrice", ge=0),
    sizes: list[str] = Query(default=[]),
    colors: list[str] = Query(default=[]),
    in_stock_only: bool = Query(default=False, alias="inStockOnly"),
    sort_by: SortBy = Query(default="featured", alias="sortBy"),
) -> FilterState:
    """
    Collect the optional filter/sort query params into a FilterState.
    """
    try:
        return FilterState(
            categories=categories,
            min_price=min_price,
            max_price=max_price,
            sizes=sizes,
            colors=colors,
            in_stock_only=in_stock_only,
            sort_by=sort_by,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


@router.get("", response_model=list[ProductRead])
@failure_message("Failed to fetch products")
def list_products(
    category: str | None = None,
    search: str | None = None,
    filters: FilterState = Depends(get_filter_state),
    session: Session = Depends(get_session),
):
    """
    List products.

    - `search` (name/description/category/tag substring) takes precedence
      over `category` (case-insensitive exact match).
    - Optional filters (categories, minPrice, maxPrice, sizes, colors,
      inStockOnly) and `sortBy` are applied to that selection.
    """
    return service.list_products(
        session, category=category, search=search, filters=filters
    )


# Declared before /{product_id} so "export" is not parsed as an id
@router.get(
    "/export/csv",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
@failure_message("Failed to export products")
def export_products_csv(
    request: Request,
    session: Session = Depends(get_session),
):
    """
    Download the full catalog as CSV.
    """
    base_url = str(request.base_url).rstrip("/")
    return Response(
        content=exporter.products_csv(session, base_url),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    responses={404: {"model": ErrorResponse}},
)
@failure_message("Failed to fetch product")
def get_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.
    """
    return service.get_product(session, product_id)
