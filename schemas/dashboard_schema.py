"""Read-only dashboard snapshot schemas."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from schemas.car_schema import CarSchema
from schemas.client_schema import ClientSchema
from schemas.master_schema import MasterSchema
from schemas.order_schema import OrderSchema


class TopClientSchema(BaseModel):
    client: ClientSchema
    order_count: int


class RecentOrderSchema(BaseModel):
    """An order together with its car, the car's owner and the assigned master."""
    model_config = ConfigDict(from_attributes=True)

    order: OrderSchema
    car: Optional[CarSchema] = None
    client: Optional[ClientSchema] = None
    master: Optional[MasterSchema] = None
    is_completed: bool = False


class DashboardStatsSchema(BaseModel):
    clients_count: int = 0
    cars_count: int = 0
    orders_count: int = 0
    services_count: int = 0
    masters_count: int = 0
    tires_count: int = 0
    completed_works_count: int = 0

    active_orders_count: int = 0
    completed_orders_count: int = 0
    today_orders_count: int = 0
    unpaid_orders_count: int = 0
    orders_with_masters_count: int = 0

    top_clients: List[TopClientSchema] = []
    recent_orders: List[RecentOrderSchema] = []
