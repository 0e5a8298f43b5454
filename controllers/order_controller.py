"""Order controller."""
from fastapi import Depends, status

from controllers.base_controller_impl import BaseControllerImpl
from schemas.order_schema import OrderSchema, OrderStatusSchema
from services.order_service import OrderService


class OrderController(BaseControllerImpl):
    """
    Controller for Order entity with CRUD operations.

    Adds GET /{id_key}/status reporting whether the order is completed.
    """

    def __init__(self):
        super().__init__(
            schema=OrderSchema,
            service_factory=lambda db: OrderService(db),
            tags=["Orders"]
        )

    def _register_routes(self):
        super()._register_routes()

        @self.router.get("/{id_key}/status", response_model=OrderStatusSchema, status_code=status.HTTP_200_OK)
        async def get_status(id_key: int, service: OrderService = Depends(self.service_dependency)):
            return service.get_status(id_key)
