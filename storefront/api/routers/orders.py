# storefront/api/routers/orders.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_lock_service, require_admin, require_user
from storefront.data.database import get_db
from storefront.domain.schemas import Envelope, OrderCreate, OrderOut, OrderPage, OrderStatusIn
from storefront.services.auth_service import Identity
from storefront.services.lock_service import LockService
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/order", tags=["order"])


def get_service(db: Session, lock_service: LockService):
    return OrderService(db, lock_service=lock_service)


@router.post("", response_model=Envelope[OrderOut], status_code=201)
def create_order(
    payload: Optional[OrderCreate] = None,
    identity: Identity = Depends(require_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    """
    Checkout: zamienia koszyk uzytkownika w zamowienie.
    """
    payment_method = payload.payment_method if payload else "whatsapp"
    order = get_service(db, lock_service).checkout(identity.id, payment_method)
    return {"success": True, "message": "Order created successfully", "data": order}


@router.get("/my-orders", response_model=Envelope[List[OrderOut]])
def my_orders(
    identity: Identity = Depends(require_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    orders = get_service(db, lock_service).list_user_orders(identity.id)
    return {"success": True, "message": f"{len(orders)} orders", "data": orders}


@router.get("/all", response_model=Envelope[OrderPage], dependencies=[Depends(require_admin)])
def all_orders(
    page: int = Query(1),
    limit: int = Query(20),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    result = get_service(db, lock_service).list_all_orders(page=page, limit=limit)
    return {"success": True, "message": "Orders fetched", "data": result}


@router.patch("/{order_id}/status", response_model=Envelope[OrderOut], dependencies=[Depends(require_admin)])
def update_status(
    order_id: str,
    payload: OrderStatusIn,
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    order = get_service(db, lock_service).update_status(order_id, payload.status)
    return {"success": True, "message": f"Order status set to {order.status}", "data": order}
