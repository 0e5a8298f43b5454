from sqlalchemy.orm import Session

from models.tire import TireModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.tire_schema import TireSchema


class TireRepository(BaseRepositoryImpl):
    def __init__(self, db: Session):
        super().__init__(TireModel, TireSchema, db)
