"""CompletedWork controller."""
from controllers.base_controller_impl import BaseControllerImpl
from schemas.completed_work_schema import CompletedWorkSchema
from services.completed_work_service import CompletedWorkService


class CompletedWorkController(BaseControllerImpl):
    """Completed works are immutable, so no update route is registered."""

    def __init__(self):
        super().__init__(
            schema=CompletedWorkSchema,
            service_factory=lambda db: CompletedWorkService(db),
            tags=["Completed Works"]
        )

    def _register_routes(self):
        self._register_get_all()
        self._register_get_one()
        self._register_create()
        self._register_delete()
