"""Abstract controller interface."""
from abc import ABC, abstractmethod


class BaseController(ABC):
    """A controller owns an APIRouter and registers its routes on it."""

    @abstractmethod
    def _register_routes(self):
        pass
