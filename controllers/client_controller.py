"""Client controller."""
from fastapi import Depends
from sqlalchemy.orm import Session

from config.database import get_db
from controllers.base_controller_impl import BaseControllerImpl
from schemas.client_schema import ClientSchema
from services.client_service import ClientService
from services.photo_storage_service import PhotoStorageService, get_photo_storage


def get_client_service(
    db: Session = Depends(get_db),
    photo_storage: PhotoStorageService = Depends(get_photo_storage),
) -> ClientService:
    return ClientService(db, photo_storage)


class ClientController(BaseControllerImpl):
    """Controller for Client entity. Deleting a client also deletes its cars' photos."""

    def __init__(self):
        super().__init__(
            schema=ClientSchema,
            service_dependency=get_client_service,
            tags=["Clients"]
        )
