# storefront/services/product_service.py
import json
import logging
from pathlib import Path

from fastapi import HTTPException, status
from sqlmodel import Session

from storefront.models.product import Product
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.filters import FilterState
from storefront.schemas.product import CategoryCount, ProductCreate
from storefront.services.catalog_filter import apply_filters

logger = logging.getLogger(__name__)


# Served as-is by GET /categories. The counts are fixed display values,
# not a live count of the catalog.
CATEGORY_COUNTS: list[tuple[str, int]] = [
    ("Men", 15),
    ("Women", 15),
    ("Kids", 15),
    ("Accessories", 15),
]


class ProductService:
    """
    Business logic for the catalog.

    Responsibilities:
      - category / search selection
      - filter + sort over the selection
      - SKU uniqueness on insert
      - seeding the catalog at startup
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Reads -----

    def list_products(
        self,
        session: Session,
        category: str | None = None,
        search: str | None = None,
        filters: FilterState | None = None,
    ) -> list[Product]:
        """
        Select products, then apply filters/sorting.

        `search` wins over `category` when both are given; blank values
        count as absent.
        """
        if search:
            products = self.repo.search(session, search)
        elif category:
            products = self.repo.get_by_category(session, category)
        else:
            products = self.repo.get_all(session)

        if filters is None:
            return products
        return apply_filters(products, filters)

    def get_product(self, session: Session, product_id: int) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    @staticmethod
    def list_categories() -> list[CategoryCount]:
        return [CategoryCount(name=name, count=count) for name, count in CATEGORY_COUNTS]

    # ----- Writes -----

    def create_product(self, session: Session, payload: ProductCreate) -> Product:
        """
        Insert a catalog entry. `id` and `created_at` are assigned here.

        Duplicate SKU => 400.
        """
        if self.repo.get_by_sku(session, payload.sku) is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"SKU already exists: {payload.sku}",
            )
        product = Product(**payload.model_dump())
        return self.repo.create(session, product)

    def seed_catalog(self, session: Session, path: Path) -> int:
        """
        Load the seed list into an empty catalog.

        Returns the number of inserted products (0 when the catalog
        already has rows, so a persistent store is never seeded twice).
        """
        if self.repo.count(session) > 0:
            return 0

        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        inserted = 0
        for entry in raw:
            self.create_product(session, ProductCreate.model_validate(entry))
            inserted += 1

        logger.info("Seeded %s products from %s", inserted, path)
        return inserted
