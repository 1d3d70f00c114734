# storefront/services/cart_service.py
import logging
import threading
import weakref

from fastapi import HTTPException, status
from sqlmodel import Session

from storefront.core.config import get_settings
from storefront.models.cart import CartItem
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import (
    CartItemCreate,
    CartItemUpdate,
    CartItemWithProduct,
    CartSummary,
)
from storefront.schemas.product import ProductRead
from storefront.services.cart_totals import calculate_totals

logger = logging.getLogger(__name__)

settings = get_settings()


class CartService:
    """
    Business logic for session carts.

    Responsibilities:
      - join lines to products on read, dropping orphans
      - merge-on-add: one line per (session, product, color, size)
      - quantity <= 0 on update means removal
      - compute derived totals (subtotal, shipping, tax, total)

    Product existence is not checked when adding; a line pointing at a
    missing product simply never shows up in reads.
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    # ---- internal helpers ----

    def _session_lock(self, session_id: str) -> threading.Lock:
        """
        Per-session lock serializing find-then-merge for one cart.
        Entries disappear once no request holds them.
        """
        with self._locks_guard:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
            return lock

    def _get_item_or_404(self, session: Session, item_id: int) -> CartItem:
        item = self.cart_repo.get_by_id(session, item_id)
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cart item not found",
            )
        return item

    # ---- public operations ----

    def get_items(self, session: Session, session_id: str) -> list[CartItemWithProduct]:
        """
        Return the session's lines joined to their products.

        Lines whose product no longer resolves are silently excluded.
        """
        joined: list[CartItemWithProduct] = []
        for it in self.cart_repo.list_for_session(session, session_id):
            product = (
                self.product_repo.get_by_id(session, it.product_id)
                if it.product_id is not None
                else None
            )
            if product is None:
                continue
            joined.append(
                CartItemWithProduct(
                    id=it.id,
                    product_id=it.product_id,
                    quantity=it.quantity,
                    selected_color=it.selected_color,
                    selected_size=it.selected_size,
                    session_id=it.session_id,
                    created_at=it.created_at,
                    product=ProductRead.model_validate(product),
                )
            )
        return joined

    def get_cart_summary(self, session: Session, session_id: str) -> CartSummary:
        """
        Return joined lines plus derived totals.
        """
        items = self.get_items(session, session_id)
        totals = calculate_totals(
            items,
            free_shipping_threshold=settings.FREE_SHIPPING_THRESHOLD,
            shipping_fee=settings.SHIPPING_FEE,
            tax_rate=settings.TAX_RATE,
        )
        return CartSummary(items=items, **totals.model_dump())

    def add_to_cart(
        self,
        session: Session,
        session_id: str,
        payload: CartItemCreate,
    ) -> CartItem:
        """
        Add a line to the session's cart.

        If a line with the same (product, color, size) exists, its quantity
        is increased instead of inserting a duplicate row. The lookup and
        the write happen under the session lock.
        """
        with self._session_lock(session_id):
            existing = self.cart_repo.find_line(
                session,
                session_id,
                payload.product_id,
                payload.selected_color,
                payload.selected_size,
            )

            if existing:
                existing.quantity += payload.quantity
                logger.debug(
                    "cart %s: merged into line %s (qty=%s)",
                    session_id, existing.id, existing.quantity,
                )
                return self.cart_repo.update(session, existing)

            item = CartItem(
                product_id=payload.product_id,
                quantity=payload.quantity,
                selected_color=payload.selected_color,
                selected_size=payload.selected_size,
                session_id=session_id,
            )
            created = self.cart_repo.create(session, item)
            logger.debug("cart %s: created line %s", session_id, created.id)
            return created

    def update_quantity(
        self,
        session: Session,
        item_id: int,
        quantity: int,
    ) -> CartItem | None:
        """
        Overwrite a line's quantity.

        quantity <= 0 removes the line and returns None.
        Missing line => 404.
        """
        return self.update_item(session, item_id, CartItemUpdate(quantity=quantity))

    def update_item(
        self,
        session: Session,
        item_id: int,
        payload: CartItemUpdate,
    ) -> CartItem | None:
        """
        Partial update of a line (quantity / color / size).

        - quantity <= 0 => line removed, returns None.
        - a color/size change that lands on another line of the same cart
          folds this line into that one (quantities added).
        """
        session_id = self._get_item_or_404(session, item_id).session_id
        # hand the store connection back before waiting on the cart lock
        session.rollback()

        with self._session_lock(session_id):
            item = self._get_item_or_404(session, item_id)

            if payload.quantity is not None and payload.quantity <= 0:
                self.cart_repo.delete(session, item)
                return None

            changes = payload.model_dump(exclude_unset=True)
            if "quantity" in changes:
                item.quantity = payload.quantity
            if "selected_color" in changes:
                item.selected_color = payload.selected_color
            if "selected_size" in changes:
                item.selected_size = payload.selected_size

            if "selected_color" in changes or "selected_size" in changes:
                # autoflush is off for the lookup so the pending change on
                # `item` does not make it find itself
                with session.no_autoflush:
                    twin = self.cart_repo.find_line(
                        session,
                        item.session_id,
                        item.product_id,
                        item.selected_color,
                        item.selected_size,
                    )
                if twin is not None and twin.id != item.id:
                    twin.quantity += item.quantity
                    session.delete(item)
                    return self.cart_repo.update(session, twin)

            return self.cart_repo.update(session, item)

    def remove_item(self, session: Session, item_id: int) -> bool:
        """
        Remove a single line. Missing line => 404.
        """
        item = self._get_item_or_404(session, item_id)
        self.cart_repo.delete(session, item)
        return True

    def clear_cart(self, session: Session, session_id: str) -> None:
        """
        Remove every line of the session. No-op for an empty cart.
        """
        with self._session_lock(session_id):
            removed = self.cart_repo.clear_session_cart(session, session_id)
        logger.debug("cart %s: cleared %s line(s)", session_id, removed)
