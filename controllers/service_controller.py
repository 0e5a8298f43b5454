"""Service catalog controller."""
from controllers.base_controller_impl import BaseControllerImpl
from schemas.service_schema import ServiceSchema
from services.service_catalog_service import ServiceCatalogService


class ServiceController(BaseControllerImpl):
    def __init__(self):
        super().__init__(
            schema=ServiceSchema,
            service_factory=lambda db: ServiceCatalogService(db),
            tags=["Services"]
        )
