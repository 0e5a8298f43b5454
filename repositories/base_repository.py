"""Abstract repository interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from sqlalchemy.orm import Session

from models.base_model import BaseModel
from schemas.base_schema import BaseSchema


class BaseRepository(ABC):
    """Persistence operations shared by every entity repository."""

    @property
    @abstractmethod
    def session(self) -> Session:
        pass

    @property
    @abstractmethod
    def model(self) -> Type[BaseModel]:
        pass

    @property
    @abstractmethod
    def schema(self) -> Type[BaseSchema]:
        pass

    @abstractmethod
    def find(self, id_key: int) -> BaseSchema:
        pass

    @abstractmethod
    def find_all(self, skip: int = 0, limit: int = 100) -> List[BaseSchema]:
        pass

    @abstractmethod
    def save(self, model: BaseModel) -> BaseSchema:
        pass

    @abstractmethod
    def update(self, id_key: int, changes: Dict[str, Any]) -> BaseSchema:
        pass

    @abstractmethod
    def remove(self, id_key: int) -> None:
        pass
