"""Service catalog: the billable services offered by the shop."""
import logging

from sqlalchemy.orm import Session

from models.service import ServiceModel
from repositories.base_repository_impl import InstanceReferencedError
from repositories.completed_work_repository import CompletedWorkRepository
from repositories.service_repository import ServiceRepository
from schemas.service_schema import ServiceSchema
from services.base_service_impl import BaseServiceImpl

logger = logging.getLogger(__name__)


class ServiceCatalogService(BaseServiceImpl):
    """Services are referenced by code from completed works and cannot be deleted while in use."""

    def __init__(self, db: Session):
        super().__init__(
            repository_class=ServiceRepository,
            model=ServiceModel,
            schema=ServiceSchema,
            db=db
        )
        self._completed_work_repository = CompletedWorkRepository(db)

    def save(self, schema: ServiceSchema) -> ServiceSchema:
        if self.repository.find_by_code(schema.service_code) is not None:
            raise ValueError(f"Service code {schema.service_code} is already in use")
        return super().save(schema)

    def update(self, id_key: int, schema: ServiceSchema) -> ServiceSchema:
        service = self.repository.find_model(id_key)
        if schema.service_code != service.service_code:
            if self._completed_work_repository.count_for_service(service.service_code):
                raise InstanceReferencedError(
                    f"Service {service.service_code} is used by completed works and cannot be re-coded"
                )
            if self.repository.find_by_code(schema.service_code) is not None:
                raise ValueError(f"Service code {schema.service_code} is already in use")
        return super().update(id_key, schema)

    def delete(self, id_key: int) -> None:
        service = self.repository.find_model(id_key)
        references = self._completed_work_repository.count_for_service(service.service_code)
        if references:
            raise InstanceReferencedError(
                f"Service {service.service_code} is used by {references} completed work(s)"
            )
        super().delete(id_key)
