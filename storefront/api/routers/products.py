#storefront/api/routers/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.data.database import get_db
from storefront.domain.schemas import CatalogOut, Envelope, ProductCreate, ProductOut, ProductUpdate
from storefront.services.label_service import LabelService
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


#trasa /categories musi byc przed /{product_id}
@router.get("/categories", response_model=Envelope[CatalogOut])
def product_categories(db: Session = Depends(get_db)):
    return {"success": True, "message": "Categories fetched", "data": LabelService(db).catalog()}


@router.get("", response_model=Envelope[List[ProductOut]])
def list_products(
    category: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    products = get_service(db).list_products(category=category, brand=brand)
    return {"success": True, "message": f"{len(products)} products", "data": products}


@router.get("/{product_id}", response_model=Envelope[ProductOut])
def get_product(product_id: str, db: Session = Depends(get_db)):
    return {"success": True, "message": "Product fetched", "data": get_service(db).get_product(product_id)}


@router.post("", response_model=Envelope[ProductOut], status_code=201, dependencies=[Depends(require_admin)])
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    product = get_service(db).create_product(payload.model_dump())
    return {"success": True, "message": "Product added successfully.", "data": product}


@router.put("/{product_id}", response_model=Envelope[ProductOut], dependencies=[Depends(require_admin)])
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    product = get_service(db).update_product(product_id, payload.model_dump(exclude_none=True))
    return {"success": True, "message": "Product updated successfully.", "data": product}


@router.delete("/{product_id}", response_model=Envelope[dict], dependencies=[Depends(require_admin)])
def delete_product(product_id: str, db: Session = Depends(get_db)):
    get_service(db).delete_product(product_id)
    return {"success": True, "message": "Product deleted successfully.", "data": None}
