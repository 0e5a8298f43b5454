"""Completed work records."""
from sqlalchemy.orm import Session

from models.completed_work import CompletedWorkModel
from repositories.base_repository_impl import InstanceNotFoundError
from repositories.completed_work_repository import CompletedWorkRepository
from repositories.master_repository import MasterRepository
from repositories.order_repository import OrderRepository
from repositories.service_repository import ServiceRepository
from schemas.completed_work_schema import CompletedWorkSchema
from services.base_service_impl import BaseServiceImpl


class CompletedWorkService(BaseServiceImpl):
    """Records are created once against an existing order, service and master, and never updated."""

    def __init__(self, db: Session):
        super().__init__(
            repository_class=CompletedWorkRepository,
            model=CompletedWorkModel,
            schema=CompletedWorkSchema,
            db=db
        )
        self._order_repository = OrderRepository(db)
        self._service_repository = ServiceRepository(db)
        self._master_repository = MasterRepository(db)

    def save(self, schema: CompletedWorkSchema) -> CompletedWorkSchema:
        if self._order_repository.find_by_number(schema.order_number) is None:
            raise InstanceNotFoundError(f"Order #{schema.order_number} not found")
        if self._service_repository.find_by_code(schema.service_code) is None:
            raise InstanceNotFoundError(f"Service with code {schema.service_code} not found")
        if not self._master_repository.exists(schema.master_id):
            raise InstanceNotFoundError(f"Master with id {schema.master_id} not found")
        return super().save(schema)

    def update(self, id_key: int, schema: CompletedWorkSchema) -> CompletedWorkSchema:
        raise ValueError("Completed works cannot be modified")
