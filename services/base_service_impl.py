"""Base service implementation delegating to a repository."""
import logging
from typing import Callable, List, Type

from sqlalchemy.orm import Session

from models.base_model import BaseModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.base_schema import BaseSchema
from services.base_service import BaseService

logger = logging.getLogger(__name__)


class BaseServiceImpl(BaseService):
    """
    CRUD service on top of a repository.

    Subclasses add foreign key validation and delete rules by overriding
    ``save``, ``update`` or ``delete``.
    """

    def __init__(
        self,
        repository_class: Callable[[Session], BaseRepositoryImpl],
        model: Type[BaseModel],
        schema: Type[BaseSchema],
        db: Session,
    ):
        self._repository = repository_class(db)
        self._model = model
        self._schema = schema
        self._session = db

    @property
    def repository(self) -> BaseRepositoryImpl:
        return self._repository

    @property
    def session(self) -> Session:
        return self._session

    @property
    def schema(self) -> Type[BaseSchema]:
        return self._schema

    @property
    def model(self) -> Type[BaseModel]:
        return self._model

    def get_all(self, skip: int = 0, limit: int = 100) -> List[BaseSchema]:
        return self.repository.find_all(skip=skip, limit=limit)

    def get_one(self, id_key: int) -> BaseSchema:
        return self.repository.find(id_key)

    def save(self, schema: BaseSchema) -> BaseSchema:
        saved = self.repository.save(self.to_model(schema))
        logger.info(f"Created {self.model.__name__} id={saved.id_key}")
        return saved

    def update(self, id_key: int, schema: BaseSchema) -> BaseSchema:
        return self.repository.update(id_key, schema.model_dump(exclude={"id_key"}))

    def delete(self, id_key: int) -> None:
        self.repository.remove(id_key)
        logger.info(f"Deleted {self.model.__name__} id={id_key}")

    def to_model(self, schema: BaseSchema) -> BaseModel:
        return self.model(**schema.model_dump(exclude={"id_key"}))
