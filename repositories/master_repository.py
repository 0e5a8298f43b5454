from sqlalchemy.orm import Session

from models.master import MasterModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.master_schema import MasterSchema


class MasterRepository(BaseRepositoryImpl):
    def __init__(self, db: Session):
        super().__init__(MasterModel, MasterSchema, db)
