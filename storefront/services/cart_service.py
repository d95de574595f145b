from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import InsufficientStock, NotFound, ValidationError
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def cart_payload(items: List[CartItemModel]) -> Dict[str, Any]:
    """Linie koszyka z rozwinietym produktem plus suma liczona z bazy."""
    lines = [
        {
            "product": i.product,
            "quantity": i.quantity,
            "subtotal": i.product.price * i.quantity,
        }
        for i in items
    ]
    total = sum((line["subtotal"] for line in lines), Decimal("0.00"))
    return {"items": lines, "total": total}


class CartService:
    """
    Prosta implementacja cqrs dla domeny cart
    commands (add, remove, clear) modyfikuja stan
    query (get) tylko odczyt

    Jeden koszyk na uzytkownika, tworzony leniwie przy pierwszym dodaniu.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_cart(self, user_id: str) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_user(user_id)

        #brak koszyka to pusta lista, nie 404
        if not cart:
            return cart_payload([])

        return cart_payload(self.repo.get_cart_items(cart.id))

    #commands
    def add_item(self, user_id: str, product_id: str, quantity: int) -> Dict[str, Any]:
        # Walidacje
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise ValidationError("Quantity must be a positive integer")
        if not product_id:
            raise ValidationError("Product ID and quantity required")

        product = self.products.get_product(product_id)
        if not product:
            raise NotFound("Product not found")

        if quantity > product.stock:
            logger.warning(
                f"User {user_id} requested {quantity} of product {product_id}, stock {product.stock}"
            )
            raise InsufficientStock(product.name, product.stock)

        try:
            cart = self._get_or_create_cart(user_id)

            # Sprawdz czy produkt juz jest w koszyku
            existing_item = self.repo.get_cart_item(cart.id, product_id)

            if existing_item:
                merged = existing_item.quantity + quantity
                if merged > product.stock:
                    logger.warning(
                        f"Merged quantity {merged} of product {product_id} exceeds stock {product.stock}"
                    )
                    raise InsufficientStock(product.name, product.stock)

                logger.info(
                    f"Produkt {product_id} juz jest w koszyku, zwiekszam ilosc "
                    f"z {existing_item.quantity} do {merged}"
                )
                existing_item.quantity = merged
            else:
                logger.info(f"Dodaje nowy produkt {product_id} do koszyka {cart.id}")
                self.repo.add_cart_item(
                    CartItemModel(
                        cart_id=cart.id,
                        product_id=product_id,
                        quantity=quantity,
                    )
                )

            self.db.commit()

        except Exception:
            self.db.rollback()
            raise

        return self.get_cart(user_id)

    def _get_or_create_cart(self, user_id: str) -> CartModel:
        cart = self.repo.get_cart_by_user(user_id)
        if cart:
            return cart

        try:
            cart = self.repo.create_cart(CartModel(user_id=user_id))
        except IntegrityError:
            # rownolegle pierwsze dodanie zalozylo juz koszyk - unique na user_id
            self.db.rollback()
            cart = self.repo.get_cart_by_user(user_id)
            if not cart:
                raise
            logger.info(f"Koszyk uzytkownika {user_id} utworzony rownolegle, uzywam {cart.id}")
            return cart

        logger.info(f"Utworzono nowy koszyk {cart.id} dla uzytkownika {user_id}")
        return cart

    def remove_item(self, user_id: str, product_id: str) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_user(user_id)

        #idempotentne - brak koszyka albo linii to nie blad
        if not cart:
            return cart_payload([])

        item = self.repo.get_cart_item(cart.id, product_id)
        if item:
            logger.info(f"Usuwanie produktu {product_id} z koszyka {cart.id}")
            self.repo.delete_cart_item(item)
            self.db.commit()

        return self.get_cart(user_id)

    def clear_cart(self, user_id: str) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_user(user_id)

        if cart:
            self.repo.delete_cart(cart)
            self.db.commit()
            logger.info(f"Koszyk {cart.id} uzytkownika {user_id} wyczyszczony")

        return cart_payload([])
