from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.service import ServiceModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.service_schema import ServiceSchema


class ServiceRepository(BaseRepositoryImpl):
    def __init__(self, db: Session):
        super().__init__(ServiceModel, ServiceSchema, db)

    def find_by_code(self, service_code: int) -> Optional[ServiceModel]:
        stmt = select(ServiceModel).where(ServiceModel.service_code == service_code)
        return self.session.scalars(stmt).first()
