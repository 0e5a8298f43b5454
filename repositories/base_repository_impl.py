"""Generic SQLAlchemy repository and the persistence-level errors."""
import logging
from typing import Any, Dict, List, Type

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from models.base_model import BaseModel
from repositories.base_repository import BaseRepository
from schemas.base_schema import BaseSchema

logger = logging.getLogger(__name__)


class InstanceNotFoundError(Exception):
    """Raised when a referenced entity does not exist."""


class InstanceReferencedError(Exception):
    """Raised when deleting or re-keying an entity that other rows still depend on."""


class StaleWriteError(Exception):
    """Raised when an update was based on an outdated version of the row."""


class BaseRepositoryImpl(BaseRepository):
    """
    Repository implementation on top of a synchronous SQLAlchemy session.

    Read methods return validated schemas. ``find_model`` exposes the mapped
    instance to services that need to work with relationships.
    """

    def __init__(self, model: Type[BaseModel], schema: Type[BaseSchema], db: Session):
        self._model = model
        self._schema = schema
        self._session = db

    @property
    def session(self) -> Session:
        return self._session

    @property
    def model(self) -> Type[BaseModel]:
        return self._model

    @property
    def schema(self) -> Type[BaseSchema]:
        return self._schema

    def find_model(self, id_key: int) -> BaseModel:
        instance = self.session.get(self.model, id_key)
        if instance is None:
            raise InstanceNotFoundError(f"{self.model.__name__} with id {id_key} not found")
        return instance

    def find(self, id_key: int) -> BaseSchema:
        return self.schema.model_validate(self.find_model(id_key))

    def find_all(self, skip: int = 0, limit: int = 100) -> List[BaseSchema]:
        stmt = select(self.model).order_by(self.model.id_key).offset(skip).limit(limit)
        models = self.session.scalars(stmt).all()
        return [self.schema.model_validate(model) for model in models]

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.model)) or 0

    def exists(self, id_key: int) -> bool:
        return self.session.get(self.model, id_key) is not None

    def save(self, model: BaseModel) -> BaseSchema:
        self.session.add(model)
        self.commit()
        self.session.refresh(model)
        return self.schema.model_validate(model)

    def update(self, id_key: int, changes: Dict[str, Any]) -> BaseSchema:
        instance = self.find_model(id_key)
        for key, value in changes.items():
            if key == "id_key" or not hasattr(instance, key):
                continue
            setattr(instance, key, value)
        self.commit()
        self.session.refresh(instance)
        return self.schema.model_validate(instance)

    def remove(self, id_key: int) -> None:
        instance = self.find_model(id_key)
        self.session.delete(instance)
        self.commit()

    def commit(self) -> None:
        """Commit the unit of work, rolling back and translating version conflicts."""
        try:
            self.session.commit()
        except StaleDataError as e:
            self.session.rollback()
            logger.warning(f"Concurrent modification of {self.model.__name__}: {e}")
            raise StaleWriteError(f"{self.model.__name__} was modified by another request") from e
        except Exception:
            self.session.rollback()
            raise
