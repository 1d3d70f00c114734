# storefront/routers/cart.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.core.cart_session import get_cart_session_id
from storefront.core.errors import failure_message
from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import (
    CartItemCreate,
    CartItemRead,
    CartItemUpdate,
    CartItemWithProduct,
    CartSummary,
)
from storefront.schemas.common import ErrorResponse, MessageResponse
from storefront.services.cart_service import CartService

router = APIRouter(
    prefix="/cart",
    tags=["Cart"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("", response_model=list[CartItemWithProduct])
@failure_message("Failed to fetch cart items")
def get_cart(
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Get the lines of the cart named by the `session-id` header,
    each joined to its product.
    """
    return service.get_items(session, session_id)


@router.get("/summary", response_model=CartSummary)
@failure_message("Failed to fetch cart summary")
def get_cart_summary(
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Cart lines plus itemCount, subtotal, shipping, tax, total and
    freeShippingRemaining.
    """
    return service.get_cart_summary(session, session_id)


@router.post("", response_model=CartItemRead)
@failure_message("Failed to add item to cart")
def add_to_cart(
    payload: CartItemCreate,
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Add a product variant to the cart.

    Adding a (product, color, size) combination already in the cart
    increases that line's quantity. Returns the created or merged line.
    """
    return service.add_to_cart(session, session_id, payload)


@router.patch(
    "/{item_id}",
    response_model=CartItemRead | MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
@failure_message("Failed to update cart item")
def update_cart_item(
    item_id: int,
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
):
    """
    Update quantity, color or size of a cart line.

    `quantity <= 0` removes the line.
    """
    item = service.update_item(session, item_id, payload)
    if item is None:
        return MessageResponse(message="Item removed from cart")
    return item


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
@failure_message("Failed to remove item from cart")
def remove_cart_item(
    item_id: int,
    session: Session = Depends(get_session),
):
    """
    Remove a single line from the cart.
    """
    service.remove_item(session, item_id)
    return MessageResponse(message="Item removed from cart")


@router.delete("", response_model=MessageResponse)
@failure_message("Failed to clear cart")
def clear_cart(
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Clear the entire cart of the `session-id` session.
    """
    service.clear_cart(session, session_id)
    return MessageResponse(message="Cart cleared")
