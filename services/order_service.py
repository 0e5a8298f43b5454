"""Order service with reference validation and order number assignment."""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from models.order import OrderModel
from repositories.base_repository_impl import InstanceNotFoundError, InstanceReferencedError
from repositories.car_repository import CarRepository
from repositories.completed_work_repository import CompletedWorkRepository
from repositories.master_repository import MasterRepository
from repositories.order_repository import OrderRepository
from schemas.order_schema import OrderSchema, OrderStatusSchema
from services.base_service_impl import BaseServiceImpl
from services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)


class OrderService(BaseServiceImpl):
    """
    Order CRUD.

    Validates the car and master references, assigns the next order number
    when none is given and defaults the order date to now. Completed works are
    linked by order number, so renumbering an order that has any is rejected.
    """

    def __init__(self, db: Session):
        super().__init__(
            repository_class=OrderRepository,
            model=OrderModel,
            schema=OrderSchema,
            db=db
        )
        self._car_repository = CarRepository(db)
        self._master_repository = MasterRepository(db)
        self._completed_work_repository = CompletedWorkRepository(db)

    def save(self, schema: OrderSchema) -> OrderSchema:
        self._validate_references(schema.car_id, schema.master_id)

        data = schema.model_dump(exclude={"id_key"})
        if data["order_number"] is None:
            data["order_number"] = self.repository.next_order_number()
        else:
            self._validate_number_free(data["order_number"])
        if data["order_date"] is None:
            data["order_date"] = datetime.now()

        saved = self.repository.save(OrderModel(**data))
        logger.info(f"Created order #{saved.order_number} (id={saved.id_key})")
        return saved

    def update(self, id_key: int, schema: OrderSchema) -> OrderSchema:
        order = self.repository.find_model(id_key)
        self._validate_references(schema.car_id, schema.master_id)

        changes = schema.model_dump(exclude={"id_key"})
        if changes["order_number"] is None:
            changes.pop("order_number")
        elif changes["order_number"] != order.order_number:
            if self._completed_work_repository.count_for_order(order.order_number):
                raise InstanceReferencedError(
                    f"Order #{order.order_number} has completed works and cannot be renumbered"
                )
            self._validate_number_free(changes["order_number"])
        if changes["order_date"] is None:
            changes.pop("order_date")

        return self.repository.update(id_key, changes)

    def get_status(self, id_key: int) -> OrderStatusSchema:
        order = self.repository.find_model(id_key)
        completed = DashboardService(self.session).is_completed(order)
        return OrderStatusSchema(order_number=order.order_number, is_completed=completed)

    def _validate_references(self, car_id: int, master_id: Optional[int]):
        if not self._car_repository.exists(car_id):
            raise InstanceNotFoundError(f"Car with id {car_id} not found")
        if master_id is not None and not self._master_repository.exists(master_id):
            raise InstanceNotFoundError(f"Master with id {master_id} not found")

    def _validate_number_free(self, order_number: int):
        if self.repository.find_by_number(order_number) is not None:
            raise ValueError(f"Order number {order_number} is already in use")
