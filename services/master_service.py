"""Master service."""
from sqlalchemy.orm import Session

from models.master import MasterModel
from repositories.base_repository_impl import InstanceReferencedError
from repositories.completed_work_repository import CompletedWorkRepository
from repositories.master_repository import MasterRepository
from schemas.master_schema import MasterSchema
from services.base_service_impl import BaseServiceImpl


class MasterService(BaseServiceImpl):
    """
    Master CRUD. A master with completed works cannot be deleted; otherwise
    deletion unassigns the master from its orders.
    """

    def __init__(self, db: Session):
        super().__init__(
            repository_class=MasterRepository,
            model=MasterModel,
            schema=MasterSchema,
            db=db
        )
        self._completed_work_repository = CompletedWorkRepository(db)

    def delete(self, id_key: int) -> None:
        self.repository.find_model(id_key)
        references = self._completed_work_repository.count_for_master(id_key)
        if references:
            raise InstanceReferencedError(f"Master {id_key} has {references} completed work(s)")
        super().delete(id_key)
