# storefront/services/order_service.py
import math
from decimal import Decimal
from typing import Any, Dict, List

from redis.exceptions import RedisError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import Conflict, EmptyCart, InsufficientStock, NotFound, ValidationError
from storefront.domain.order_status import PENDING, check_transition
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import CHECKOUT_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

MAX_PAGE_SIZE = 100


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Separacja od CartService - koszyk jest tylko zrodlem pozycji przy checkoucie.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService | None = None,
    ):
        self.db = db
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)
        self.products = ProductRepo(db)
        self.lock_service = lock_service
        self.notification_service = notification_service or NotificationService()

    def checkout(self, user_id: str, payment_method: str = "whatsapp") -> OrderModel:
        """
        Use Case: Tworzenie zamowienia z koszyka.

        1. Wczytuje koszyk z produktami (EmptyCart gdy brak / pusty)
        2. Sprawdza stan kazdej pozycji
        3. Zmniejsza stan warunkowym update (stock >= q)
        4. Liczy total z cen odczytanych w kroku 1
        5. Tworzy zamowienie ze skopiowanymi pozycjami
        6. Usuwa koszyk

        Kroki 2-6 ida w jednej transakcji - albo wszystko, albo nic.
        """
        key = self.lock_service.checkout_key(user_id)
        token = self.lock_service.new_token()

        if not self.lock_service.acquire(key, token, CHECKOUT_LOCK_TTL_SECONDS):
            raise Conflict("Checkout already in progress")

        try:
            order = self._place_order(user_id, payment_method)
        finally:
            self._release_lock(key, token)

        try:
            self.notification_service.send_order_notification(
                user_id, order.id, float(order.total_price)
            )
        except Exception as e:
            # zamowienie jest juz zapisane, brak powiadomienia nie cofa checkoutu
            logger.warning(f"Failed to queue notification for order {order.id}: {e}")

        return order

    def _release_lock(self, key: str, token: str) -> None:
        try:
            self.lock_service.release(key, token)
        except RedisError as e:
            # lock wygasa sam po TTL
            logger.warning(f"Failed to release lock {key}: {e}")

    def _place_order(self, user_id: str, payment_method: str) -> OrderModel:
        cart = self.carts.get_cart_by_user(user_id)
        items = self.carts.get_cart_items(cart.id) if cart else []

        if not items:
            logger.warning(f"Checkout attempted with empty cart by user {user_id}")
            raise EmptyCart()

        logger.info(f"Checkout started for user {user_id}, {len(items)} lines")

        # ceny i nazwy z momentu odczytu - nie czytamy ponownie po dekremencie
        snapshot = [
            {
                "product_id": i.product_id,
                "name": i.product.name,
                "unit_price": i.product.price,
                "quantity": i.quantity,
                "stock": i.product.stock,
            }
            for i in items
        ]

        for line in snapshot:
            if line["quantity"] > line["stock"]:
                logger.warning(
                    f"Checkout rejected for user {user_id}: product {line['product_id']} "
                    f"qty {line['quantity']} > stock {line['stock']}"
                )
                raise InsufficientStock(line["name"], line["stock"])

        total = sum(
            (Decimal(line["unit_price"]) * line["quantity"] for line in snapshot),
            Decimal("0.00"),
        )

        try:
            for line in snapshot:
                rowcount = self.products.decrement_stock(line["product_id"], line["quantity"])

                # rowcount 0 - ktos inny zdazyl zejsc ze stanem ponizej naszej ilosci
                if rowcount == 0:
                    logger.warning(
                        f"Stock for product {line['product_id']} changed during checkout of user {user_id}"
                    )
                    raise InsufficientStock(line["name"])

            order = OrderModel(
                user_id=user_id,
                status=PENDING,
                payment_method=payment_method,
                total_price=total,
                items=[
                    OrderItemModel(
                        product_id=line["product_id"],
                        name=line["name"],
                        unit_price=line["unit_price"],
                        quantity=line["quantity"],
                    )
                    for line in snapshot
                ],
            )
            self.repo.create_order(order)
            self.carts.delete_cart(cart)

            self.db.commit()

        except Exception:
            self.db.rollback()
            raise

        # stany produktow w sesji sa nieaktualne po update bez synchronizacji
        self.db.expire_all()

        logger.info(f"Order {order.id} created for user {user_id}, total {total}")
        return order

    #query
    def list_user_orders(self, user_id: str) -> List[OrderModel]:
        return self.repo.list_user_orders(user_id)

    def list_all_orders(self, page: int = 1, limit: int = 20) -> Dict[str, Any]:
        if page < 1:
            raise ValidationError("page must be >= 1")
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

        total = self.repo.count_orders()
        orders = self.repo.list_orders(offset=(page - 1) * limit, limit=limit)

        return {
            "items": orders,
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit) if total else 0,
        }

    def get_order(self, order_id: str) -> OrderModel:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFound("Order not found")
        return order

    def update_status(self, order_id: str, status: str) -> OrderModel:
        order = self.get_order(order_id)
        new_status = check_transition(order.status, (status or "").strip().lower())

        order.status = new_status
        self.db.commit()

        logger.info(f"Order {order.id} status changed to {new_status}")
        return order
