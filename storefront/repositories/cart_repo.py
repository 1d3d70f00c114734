# storefront/repositories/cart_repo.py
from sqlmodel import Session, select

from storefront.models.cart import CartItem


class CartRepository:

    # Get items for a session, oldest first
    def list_for_session(self, session: Session, session_id: str) -> list[CartItem]:
        stmt = (
            select(CartItem)
            .where(CartItem.session_id == session_id)
            .order_by(CartItem.id)
        )
        return list(session.exec(stmt).all())

    def find_line(
        self,
        session: Session,
        session_id: str,
        product_id: int | None,
        selected_color: str | None,
        selected_size: str | None,
    ) -> CartItem | None:
        """
        Find the line for a (session, product, color, size) tuple.

        `== None` compiles to IS NULL, so a missing color or size only
        matches another missing one.
        """
        stmt = select(CartItem).where(
            CartItem.session_id == session_id,
            CartItem.product_id == product_id,
            CartItem.selected_color == selected_color,
            CartItem.selected_size == selected_size,
        )
        return session.exec(stmt.order_by(CartItem.id)).first()

    def get_by_id(self, session: Session, item_id: int) -> CartItem | None:
        return session.get(CartItem, item_id)

    # CRUD
    def create(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def update(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def delete(self, session: Session, item: CartItem) -> None:
        session.delete(item)
        session.commit()

    def clear_session_cart(self, session: Session, session_id: str) -> int:
        rows = self.list_for_session(session, session_id)
        for row in rows:
            session.delete(row)
        session.commit()
        return len(rows)
