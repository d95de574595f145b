from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.data.database import get_db
from storefront.domain.schemas import CarCreate, CarOut, CarUpdate, Envelope
from storefront.services.car_service import CarService

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("", response_model=Envelope[List[CarOut]])
def list_cars(db: Session = Depends(get_db)):
    cars = CarService(db).list_cars()
    return {"success": True, "message": f"{len(cars)} cars", "data": cars}


@router.post("", response_model=Envelope[CarOut], status_code=201, dependencies=[Depends(require_admin)])
def create_car(payload: CarCreate, db: Session = Depends(get_db)):
    car = CarService(db).create_car(payload.model_dump())
    return {"success": True, "message": "Car created successfully.", "data": car}


@router.put("/{car_id}", response_model=Envelope[CarOut], dependencies=[Depends(require_admin)])
def update_car(car_id: str, payload: CarUpdate, db: Session = Depends(get_db)):
    car = CarService(db).update_car(car_id, payload.model_dump(exclude_none=True))
    return {"success": True, "message": "Car updated successfully.", "data": car}


@router.delete("/{car_id}", response_model=Envelope[dict], dependencies=[Depends(require_admin)])
def delete_car(car_id: str, db: Session = Depends(get_db)):
    CarService(db).delete_car(car_id)
    return {"success": True, "message": "Car deleted successfully.", "data": None}
