"""Tire service with car reference validation."""
from sqlalchemy.orm import Session

from models.tire import TireModel
from repositories.base_repository_impl import InstanceNotFoundError
from repositories.car_repository import CarRepository
from repositories.tire_repository import TireRepository
from schemas.tire_schema import TireSchema
from services.base_service_impl import BaseServiceImpl


class TireService(BaseServiceImpl):

    def __init__(self, db: Session):
        super().__init__(
            repository_class=TireRepository,
            model=TireModel,
            schema=TireSchema,
            db=db
        )
        self._car_repository = CarRepository(db)

    def save(self, schema: TireSchema) -> TireSchema:
        self._validate_car(schema.car_id)
        return super().save(schema)

    def update(self, id_key: int, schema: TireSchema) -> TireSchema:
        self._validate_car(schema.car_id)
        return super().update(id_key, schema)

    def _validate_car(self, car_id: int):
        if not self._car_repository.exists(car_id):
            raise InstanceNotFoundError(f"Car with id {car_id} not found")
