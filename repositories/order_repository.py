from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from models.car import CarModel
from models.order import OrderModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.order_schema import OrderSchema


class OrderRepository(BaseRepositoryImpl):
    def __init__(self, db: Session):
        super().__init__(OrderModel, OrderSchema, db)

    def find_by_number(self, order_number: int) -> Optional[OrderModel]:
        stmt = select(OrderModel).where(OrderModel.order_number == order_number)
        return self.session.scalars(stmt).first()

    def next_order_number(self) -> int:
        current = self.session.scalar(select(func.max(OrderModel.order_number)))
        return (current or 0) + 1

    def count_between(self, start: datetime, end: datetime) -> int:
        stmt = select(func.count(OrderModel.id_key)).where(
            OrderModel.order_date >= start, OrderModel.order_date < end
        )
        return self.session.scalar(stmt) or 0

    def count_unpaid(self) -> int:
        stmt = select(func.count(OrderModel.id_key)).where(OrderModel.payment_date.is_(None))
        return self.session.scalar(stmt) or 0

    def count_assigned(self) -> int:
        stmt = select(func.count(OrderModel.id_key)).where(OrderModel.master_id.is_not(None))
        return self.session.scalar(stmt) or 0

    def order_numbers(self) -> List[int]:
        return list(self.session.scalars(select(OrderModel.order_number)).all())

    def find_recent_with_relations(self, limit: int) -> List[OrderModel]:
        """Newest orders with car, the car's client and master loaded in the same query."""
        stmt = (
            select(OrderModel)
            .options(
                joinedload(OrderModel.car).joinedload(CarModel.client),
                joinedload(OrderModel.master),
            )
            .order_by(OrderModel.order_date.desc(), OrderModel.id_key.desc())
            .limit(limit)
        )
        return list(self.session.scalars(stmt).unique().all())
