from sqlalchemy.orm import Session

from models.car import CarModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.car_schema import CarSchema


class CarRepository(BaseRepositoryImpl):
    def __init__(self, db: Session):
        super().__init__(CarModel, CarSchema, db)
