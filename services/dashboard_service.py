"""Dashboard statistics computed from the stored entities."""
import logging
from datetime import datetime, timedelta
from typing import List, Optional, Set

from sqlalchemy.orm import Session

from config.settings import get_settings
from models.order import OrderModel
from repositories.car_repository import CarRepository
from repositories.client_repository import ClientRepository
from repositories.completed_work_repository import CompletedWorkRepository
from repositories.master_repository import MasterRepository
from repositories.order_repository import OrderRepository
from repositories.service_repository import ServiceRepository
from repositories.tire_repository import TireRepository
from schemas.car_schema import CarSchema
from schemas.client_schema import ClientSchema
from schemas.dashboard_schema import DashboardStatsSchema, RecentOrderSchema, TopClientSchema
from schemas.master_schema import MasterSchema
from schemas.order_schema import OrderSchema

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Read-only aggregation over orders and their completed works.

    An order is completed when at least one completed work references its
    order number. The set of completed order numbers is loaded once per call
    and reused for every membership test.
    """

    def __init__(self, db: Session):
        self.session = db
        self.settings = get_settings()
        self.clients = ClientRepository(db)
        self.cars = CarRepository(db)
        self.orders = OrderRepository(db)
        self.services = ServiceRepository(db)
        self.masters = MasterRepository(db)
        self.tires = TireRepository(db)
        self.completed_works = CompletedWorkRepository(db)

    def completed_order_numbers(self) -> Set[int]:
        return self.completed_works.distinct_order_numbers()

    def is_completed(self, order: OrderModel, completed: Optional[Set[int]] = None) -> bool:
        if completed is None:
            completed = self.completed_order_numbers()
        return order.order_number in completed

    def completed_count(self, completed: Optional[Set[int]] = None) -> int:
        if completed is None:
            completed = self.completed_order_numbers()
        return len(completed)

    def active_count(self, completed: Optional[Set[int]] = None) -> int:
        if completed is None:
            completed = self.completed_order_numbers()
        return sum(1 for number in self.orders.order_numbers() if number not in completed)

    def today_count(self, now: Optional[datetime] = None) -> int:
        """Orders dated on the server's current calendar day."""
        start = (now or datetime.now()).replace(hour=0, minute=0, second=0, microsecond=0)
        return self.orders.count_between(start, start + timedelta(days=1))

    def unpaid_count(self) -> int:
        return self.orders.count_unpaid()

    def assigned_count(self) -> int:
        return self.orders.count_assigned()

    def top_clients(self, n: int) -> List[TopClientSchema]:
        """Top ``n`` clients by order count; equal counts are ordered by client ID."""
        return [
            TopClientSchema(client=ClientSchema.model_validate(client), order_count=count)
            for client, count in self.clients.top_by_order_count(n)
        ]

    def recent_orders(self, n: int, completed: Optional[Set[int]] = None) -> List[RecentOrderSchema]:
        if completed is None:
            completed = self.completed_order_numbers()
        result = []
        for order in self.orders.find_recent_with_relations(n):
            car = order.car
            result.append(RecentOrderSchema(
                order=OrderSchema.model_validate(order),
                car=CarSchema.model_validate(car) if car else None,
                client=ClientSchema.model_validate(car.client) if car and car.client else None,
                master=MasterSchema.model_validate(order.master) if order.master else None,
                is_completed=self.is_completed(order, completed),
            ))
        return result

    def get_dashboard_stats(self) -> DashboardStatsSchema:
        completed = self.completed_order_numbers()
        stats = DashboardStatsSchema(
            clients_count=self.clients.count(),
            cars_count=self.cars.count(),
            orders_count=self.orders.count(),
            services_count=self.services.count(),
            masters_count=self.masters.count(),
            tires_count=self.tires.count(),
            completed_works_count=self.completed_works.count(),
            active_orders_count=self.active_count(completed),
            completed_orders_count=self.completed_count(completed),
            today_orders_count=self.today_count(),
            unpaid_orders_count=self.unpaid_count(),
            orders_with_masters_count=self.assigned_count(),
            top_clients=self.top_clients(self.settings.TOP_CLIENTS_LIMIT),
            recent_orders=self.recent_orders(self.settings.RECENT_ORDERS_LIMIT, completed),
        )
        logger.debug(
            f"Dashboard: {stats.orders_count} orders, {stats.active_orders_count} active, "
            f"{stats.completed_orders_count} completed"
        )
        return stats
