# storefront/services/label_service.py
from typing import Dict, List

from sqlalchemy.orm import Session

from storefront.data.models.label import BrandModel, CategoryModel
from storefront.data.models.product import ProductModel
from storefront.domain.errors import Conflict, NotFound, ValidationError
from storefront.domain.labels import UNBRANDED, UNCATEGORIZED, label_names, merge_labels
from storefront.repos.label_repo import LabelRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _canonical(name: str, existing: List[Dict[str, str]]) -> str | None:
    """Nazwa z rejestru pasujaca bez wielkosci liter albo None."""
    wanted = name.lower()
    for known in label_names(existing):
        if known.lower() == wanted:
            return known
    return None


class LabelService:
    """
    Rejestr kategorii i marek.
    Dwa zrodla: tabela categories/brands oraz wartosci distinct z produktow,
    laczone zawsze przez merge_labels.
    """

    def __init__(self, db: Session):
        self.db = db
        self.products = ProductRepo(db)
        self.categories = LabelRepo(db, CategoryModel)
        self.brands = LabelRepo(db, BrandModel)

    #query
    def list_categories(self) -> List[Dict[str, str]]:
        return merge_labels(self.categories.list_pairs(), self.products.distinct_categories())

    def list_brands(self) -> List[Dict[str, str]]:
        return merge_labels(self.brands.list_pairs(), self.products.distinct_brands())

    def catalog(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            "brands": self.list_brands(),
            "categories": self.list_categories(),
        }

    #commands
    def add_category(self, name: str, label: str | None = None):
        return self._add(name, label, self.categories, self.list_categories(), "Category")

    def add_brand(self, name: str, label: str | None = None):
        return self._add(name, label, self.brands, self.list_brands(), "Brand")

    def delete_category(self, name: str) -> int:
        return self._delete(
            name, self.categories, self.list_categories(),
            ProductModel.category, UNCATEGORIZED, "Category",
        )

    def delete_brand(self, name: str) -> int:
        return self._delete(
            name, self.brands, self.list_brands(),
            ProductModel.brand, UNBRANDED, "Brand",
        )

    def _add(self, name, label, repo: LabelRepo, existing, kind: str):
        name = (name or "").strip()
        if not name:
            raise ValidationError(f"{kind} name is required.")

        if _canonical(name, existing):
            raise Conflict(f"{kind} already exists.")

        entry = repo.create(name, (label or "").strip() or None)
        self.db.commit()

        logger.info(f"{kind} '{name}' added")
        return entry

    def _delete(self, name, repo: LabelRepo, existing, column, fallback: str, kind: str) -> int:
        name = (name or "").strip()
        if not name:
            raise ValidationError(f"{kind} name is required.")

        canonical = _canonical(name, existing)
        if not canonical:
            raise NotFound(f"{kind} not found.")
        name = canonical

        try:
            moved = self.products.reassign(column, name, fallback)
            stored = repo.get_by_name(name)
            if stored:
                repo.delete(stored)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        # bulk update nie synchronizuje obiektow w sesji
        self.db.expire_all()

        logger.info(f"{kind} '{name}' deleted, {moved} products moved to '{fallback}'")
        return moved
