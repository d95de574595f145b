#storefront/api/routers/labels.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.data.database import get_db
from storefront.domain.schemas import BrandIn, CatalogOut, CategoryIn, Envelope, LabelOut
from storefront.services.label_service import LabelService

categories_router = APIRouter(prefix="/categories", tags=["categories"])
brands_router = APIRouter(prefix="/brands", tags=["brands"])


@categories_router.get("", response_model=Envelope[CatalogOut])
def get_categories(db: Session = Depends(get_db)):
    return {"success": True, "message": "Categories fetched", "data": LabelService(db).catalog()}


@categories_router.post("", response_model=Envelope[LabelOut], status_code=201, dependencies=[Depends(require_admin)])
def add_category(payload: CategoryIn, db: Session = Depends(get_db)):
    entry = LabelService(db).add_category(payload.category, payload.label)
    return {
        "success": True,
        "message": f"Category '{entry.name}' added successfully.",
        "data": {"name": entry.name, "label": entry.label or entry.name},
    }


@categories_router.delete("", response_model=Envelope[dict], dependencies=[Depends(require_admin)])
def delete_category(payload: CategoryIn, db: Session = Depends(get_db)):
    moved = LabelService(db).delete_category(payload.category)
    return {
        "success": True,
        "message": f"Category '{payload.category.strip()}' deleted successfully.",
        "data": {"reassigned": moved},
    }


@brands_router.post("", response_model=Envelope[LabelOut], status_code=201, dependencies=[Depends(require_admin)])
def add_brand(payload: BrandIn, db: Session = Depends(get_db)):
    entry = LabelService(db).add_brand(payload.brand, payload.label)
    return {
        "success": True,
        "message": f"Brand '{entry.name}' added successfully.",
        "data": {"name": entry.name, "label": entry.label or entry.name},
    }


@brands_router.delete("", response_model=Envelope[dict], dependencies=[Depends(require_admin)])
def delete_brand(payload: BrandIn, db: Session = Depends(get_db)):
    moved = LabelService(db).delete_brand(payload.brand)
    return {
        "success": True,
        "message": f"Brand '{payload.brand.strip()}' deleted successfully.",
        "data": {"reassigned": moved},
    }
