from typing import Set

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.completed_work import CompletedWorkModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.completed_work_schema import CompletedWorkSchema


class CompletedWorkRepository(BaseRepositoryImpl):
    def __init__(self, db: Session):
        super().__init__(CompletedWorkModel, CompletedWorkSchema, db)

    def distinct_order_numbers(self) -> Set[int]:
        stmt = select(CompletedWorkModel.order_number).distinct()
        return set(self.session.scalars(stmt).all())

    def count_for_order(self, order_number: int) -> int:
        stmt = select(func.count(CompletedWorkModel.id_key)).where(
            CompletedWorkModel.order_number == order_number
        )
        return self.session.scalar(stmt) or 0

    def count_for_service(self, service_code: int) -> int:
        stmt = select(func.count(CompletedWorkModel.id_key)).where(
            CompletedWorkModel.service_code == service_code
        )
        return self.session.scalar(stmt) or 0

    def count_for_master(self, master_id: int) -> int:
        stmt = select(func.count(CompletedWorkModel.id_key)).where(CompletedWorkModel.master_id == master_id)
        return self.session.scalar(stmt) or 0
