# storefront/services/car_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.data.models.car import CarModel
from storefront.domain.errors import NotFound
from storefront.repos.car_repo import CarRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CarService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CarRepo(db)

    def list_cars(self) -> List[CarModel]:
        return self.repo.list_cars()

    def get_car(self, car_id: str) -> CarModel:
        car = self.repo.get_car(car_id)
        if not car:
            raise NotFound("Car not found.")
        return car

    def create_car(self, data: Dict[str, Any]) -> CarModel:
        car = CarModel(
            name=data["name"],
            brand=data["brand"],
            price=Decimal(str(data["price"])),
            description=data.get("description") or "",
            images=list(data.get("images") or []),
            contact_type=data.get("contact_type") or "whatsapp",
            contact_link=data["contact_link"],
        )
        self.repo.create_car(car)
        self.db.commit()

        logger.info(f"Car {car.id} '{car.name}' created")
        return car

    def update_car(self, car_id: str, changes: Dict[str, Any]) -> CarModel:
        car = self.get_car(car_id)

        if "price" in changes:
            changes["price"] = Decimal(str(changes["price"]))
        if "images" in changes:
            changes["images"] = list(changes["images"])

        for field, value in changes.items():
            setattr(car, field, value)

        self.db.commit()

        logger.info(f"Car {car.id} updated: {sorted(changes)}")
        return car

    def delete_car(self, car_id: str) -> None:
        car = self.get_car(car_id)
        self.repo.delete_car(car)
        self.db.commit()

        logger.info(f"Car {car_id} deleted")
