from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.car import CarModel
from models.client import ClientModel
from models.order import OrderModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.client_schema import ClientSchema


class ClientRepository(BaseRepositoryImpl):
    def __init__(self, db: Session):
        super().__init__(ClientModel, ClientSchema, db)

    def top_by_order_count(self, limit: int) -> List[Tuple[ClientModel, int]]:
        """
        Clients ranked by the number of orders placed for any of their cars.

        Ties are broken by client ID ascending. Clients without orders are
        ranked with a count of zero.
        """
        order_count = func.count(OrderModel.id_key).label("order_count")
        stmt = (
            select(ClientModel, order_count)
            .outerjoin(CarModel, CarModel.client_id == ClientModel.id_key)
            .outerjoin(OrderModel, OrderModel.car_id == CarModel.id_key)
            .group_by(ClientModel.id_key)
            .order_by(order_count.desc(), ClientModel.id_key.asc())
            .limit(limit)
        )
        return [(client, count) for client, count in self.session.execute(stmt).all()]
