# storefront/services/product_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import NotFound, ValidationError
from storefront.domain.labels import UNBRANDED, UNCATEGORIZED
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.label_service import LabelService
from storefront.utils.settings import LABEL_POLICY
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

LABEL_POLICIES = ("register", "fallback", "reject")


class ProductService:
    """
    CRUD produktow.

    Nieznana marka/kategoria przy zapisie jest obslugiwana wg jednej polityki:
    register - etykieta zostaje przyjeta i pojawia sie w rejestrze jako distinct
    fallback - podmiana na Uncategorized / Unbranded
    reject - ValidationError
    """

    def __init__(self, db: Session, label_policy: str | None = None):
        self.db = db
        self.repo = ProductRepo(db)
        self.carts = CartRepo(db)
        self.labels = LabelService(db)
        self.label_policy = (label_policy or LABEL_POLICY).lower()
        if self.label_policy not in LABEL_POLICIES:
            raise ValueError(f"Unknown label policy: {self.label_policy}")

    #query
    def list_products(self, category: str | None = None, brand: str | None = None) -> List[ProductModel]:
        return self.repo.list_products(category=category, brand=brand)

    def get_product(self, product_id: str) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFound("Product not found.")
        return product

    #commands
    def create_product(self, data: Dict[str, Any]) -> ProductModel:
        product = ProductModel(
            name=data["name"].strip(),
            description=data["description"],
            price=Decimal(str(data["price"])),
            image=data["image"],
            category=self._resolve_label(data["category"], self.labels.list_categories(), UNCATEGORIZED, "category"),
            brand=self._resolve_label(data["brand"], self.labels.list_brands(), UNBRANDED, "brand"),
            stock=data.get("stock") or 0,
        )
        self.repo.create_product(product)
        self.db.commit()

        logger.info(f"Product {product.id} '{product.name}' created")
        return product

    def update_product(self, product_id: str, changes: Dict[str, Any]) -> ProductModel:
        product = self.get_product(product_id)

        if "name" in changes:
            changes["name"] = (changes["name"] or "").strip()
            if not changes["name"]:
                raise ValidationError("Product name is required.")
        if "category" in changes:
            changes["category"] = self._resolve_label(
                changes["category"], self.labels.list_categories(), UNCATEGORIZED, "category"
            )
        if "brand" in changes:
            changes["brand"] = self._resolve_label(
                changes["brand"], self.labels.list_brands(), UNBRANDED, "brand"
            )
        if "price" in changes:
            changes["price"] = Decimal(str(changes["price"]))

        for field, value in changes.items():
            setattr(product, field, value)

        self.db.commit()

        logger.info(f"Product {product.id} updated: {sorted(changes)}")
        return product

    def delete_product(self, product_id: str) -> None:
        product = self.get_product(product_id)

        #produkt znika tez z koszykow
        removed = self.carts.delete_items_for_product(product.id)
        self.repo.delete_product(product)
        self.db.commit()

        logger.info(f"Product {product_id} deleted, removed from {removed} cart lines")

    def _resolve_label(self, value: str, known: List[Dict[str, str]], fallback: str, kind: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValidationError(f"Product {kind} is required.")

        # dopasowanie bez wielkosci liter zwraca nazwe kanoniczna
        for entry in known:
            if entry["name"].lower() == value.lower():
                return entry["name"]

        if self.label_policy == "fallback":
            logger.info(f"Unknown {kind} '{value}', falling back to '{fallback}'")
            return fallback
        if self.label_policy == "reject":
            raise ValidationError(f"Unknown {kind} '{value}'.")
        return value
