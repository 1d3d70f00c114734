# storefront/repositories/product_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from storefront.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure store operations (reads + insert).
    - No FastAPI, no business logic.
    """

    def get_all(self, session: Session) -> list[Product]:
        stmt = select(Product).order_by(Product.id)
        return list(session.exec(stmt).all())

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        return session.get(Product, product_id)

    def get_by_sku(self, session: Session, sku: str) -> Product | None:
        stmt = select(Product).where(Product.sku == sku)
        return session.exec(stmt).first()

    def get_by_category(self, session: Session, category: str) -> list[Product]:
        # case-insensitive exact match
        stmt = (
            select(Product)
            .where(func.lower(Product.category) == category.lower())
            .order_by(Product.id)
        )
        return list(session.exec(stmt).all())

    def search(self, session: Session, query: str) -> list[Product]:
        """
        Case-insensitive substring match against name, description,
        category or any tag.

        Tags live in a JSON column, so the match runs in Python over the
        ordered catalog rather than in SQL.
        """
        needle = query.lower()

        def _matches(product: Product) -> bool:
            if needle in product.name.lower():
                return True
            if product.description and needle in product.description.lower():
                return True
            if needle in product.category.lower():
                return True
            return any(needle in tag.lower() for tag in product.tags or [])

        return [p for p in self.get_all(session) if _matches(p)]

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Product)
        return int(session.exec(stmt).one() or 0)

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product
