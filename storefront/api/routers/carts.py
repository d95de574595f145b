#storefront/api/routers/carts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_user
from storefront.data.database import get_db
from storefront.domain.schemas import CartItemIn, CartOut, Envelope
from storefront.services.auth_service import Identity
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=Envelope[CartOut])
def get_cart(identity: Identity = Depends(require_user), db: Session = Depends(get_db)):
    return {"success": True, "message": "Cart fetched successfully.", "data": get_service(db).get_cart(identity.id)}


@router.post("", response_model=Envelope[CartOut], status_code=201)
def add_item(
    payload: CartItemIn,
    identity: Identity = Depends(require_user),
    db: Session = Depends(get_db),
):
    cart = get_service(db).add_item(identity.id, payload.product_id, payload.quantity)
    return {"success": True, "message": "Item added to cart", "data": cart}


#/clear przed /{product_id}
@router.delete("/clear", response_model=Envelope[CartOut])
def clear_cart(identity: Identity = Depends(require_user), db: Session = Depends(get_db)):
    return {"success": True, "message": "Cart cleared successfully.", "data": get_service(db).clear_cart(identity.id)}


@router.delete("/{product_id}", response_model=Envelope[CartOut])
def remove_item(
    product_id: str,
    identity: Identity = Depends(require_user),
    db: Session = Depends(get_db),
):
    cart = get_service(db).remove_item(identity.id, product_id)
    return {"success": True, "message": "Item removed from cart", "data": cart}
