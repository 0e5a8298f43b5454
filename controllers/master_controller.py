"""Master controller."""
from controllers.base_controller_impl import BaseControllerImpl
from schemas.master_schema import MasterSchema
from services.master_service import MasterService


class MasterController(BaseControllerImpl):
    def __init__(self):
        super().__init__(
            schema=MasterSchema,
            service_factory=lambda db: MasterService(db),
            tags=["Masters"]
        )
