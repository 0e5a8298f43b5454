"""Tire controller."""
from controllers.base_controller_impl import BaseControllerImpl
from schemas.tire_schema import TireSchema
from services.tire_service import TireService


class TireController(BaseControllerImpl):
    def __init__(self):
        super().__init__(
            schema=TireSchema,
            service_factory=lambda db: TireService(db),
            tags=["Tires"]
        )
