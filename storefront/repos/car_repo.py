from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.car import CarModel


class CarRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_car(self, car_id: str) -> CarModel | None:
        return self.db.get(CarModel, car_id)

    def list_cars(self) -> List[CarModel]:
        return list(
            self.db.execute(
                select(CarModel).order_by(CarModel.created_at.desc())
            ).scalars().all()
        )

    def create_car(self, car: CarModel) -> CarModel:
        self.db.add(car)
        self.db.flush()
        return car

    def delete_car(self, car: CarModel) -> None:
        self.db.delete(car)
        self.db.flush()
