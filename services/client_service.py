"""Client service."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from models.client import ClientModel
from repositories.client_repository import ClientRepository
from schemas.client_schema import ClientSchema
from services.base_service_impl import BaseServiceImpl
from services.car_service import CarService
from services.photo_storage_service import PhotoStorageService

logger = logging.getLogger(__name__)


class ClientService(BaseServiceImpl):
    """Client CRUD. Deleting a client removes its cars together with their photos."""

    def __init__(self, db: Session, photo_storage: Optional[PhotoStorageService] = None):
        super().__init__(
            repository_class=ClientRepository,
            model=ClientModel,
            schema=ClientSchema,
            db=db
        )
        self._car_service = CarService(db, photo_storage)

    def delete(self, id_key: int) -> None:
        client = self.repository.find_model(id_key)
        cars_count = len(client.cars)
        paths = [path for car in client.cars for path in CarService.photo_paths(car)]
        self.repository.remove(id_key)
        self._car_service.discard_photos(paths)
        logger.info(f"Deleted client id={id_key} with {cars_count} car(s)")
