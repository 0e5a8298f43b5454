"""Car service with photo lifecycle management."""
import logging
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from models.car import CarModel
from repositories.base_repository_impl import InstanceNotFoundError, StaleWriteError
from repositories.car_repository import CarRepository
from repositories.client_repository import ClientRepository
from schemas.car_schema import CarSchema
from services.base_service_impl import BaseServiceImpl
from services.photo_storage_service import PhotoStorageError, PhotoStorageService, PhotoUpload
from utils.photo_list import current_photos, encode_photo_list, reconcile_photos

logger = logging.getLogger(__name__)

# Set by the photo lifecycle or the ORM, never copied from request data.
MANAGED_FIELDS = {"photo_path", "additional_photos", "version_id"}


class CarService(BaseServiceImpl):
    """
    CRUD for cars, keeping the primary/additional photo fields consistent
    with the files in photo storage.

    New uploads are written before the row is touched and removed files are
    deleted only after the row was committed, so a failed request never
    leaves the car pointing at a missing file.
    """

    def __init__(self, db: Session, photo_storage: Optional[PhotoStorageService] = None):
        super().__init__(
            repository_class=CarRepository,
            model=CarModel,
            schema=CarSchema,
            db=db
        )
        self.photo_storage = photo_storage or PhotoStorageService()
        self._client_repository = ClientRepository(db)

    def save(self, schema: CarSchema, photos: Sequence[PhotoUpload] = ()) -> CarSchema:
        """Create a car; the first stored photo becomes the primary one."""
        self._validate_client(schema.client_id)

        stored = self._store_uploads(photos)
        _, primary, additional = reconcile_photos([], [], stored)

        car = CarModel(**schema.model_dump(exclude={"id_key"} | MANAGED_FIELDS))
        car.photo_path = primary
        car.additional_photos = encode_photo_list(additional)

        try:
            saved = self.repository.save(car)
        except Exception:
            self.discard_photos(stored)
            raise

        logger.info(f"Created car id={saved.id_key} with {len(stored)} photo(s)")
        return saved

    def update(
        self,
        id_key: int,
        schema: CarSchema,
        photos: Sequence[PhotoUpload] = (),
        removed_photos: Iterable[str] = (),
    ) -> CarSchema:
        """
        Update car fields and reconcile its photos.

        Removed paths that the car does not hold are ignored. Surviving photos
        keep their order and new uploads are appended after them.

        Raises:
            InstanceNotFoundError: Car or client does not exist
            StaleWriteError: ``schema.version_id`` is outdated
            PhotoStorageError: An upload could not be written
        """
        car = self.repository.find_model(id_key)
        if schema.version_id is not None and schema.version_id != car.version_id:
            raise StaleWriteError(
                f"Car {id_key} was modified by another request "
                f"(version {car.version_id}, got {schema.version_id})"
            )
        self._validate_client(schema.client_id)

        existing = current_photos(car.photo_path, car.additional_photos)
        stored = self._store_uploads(photos)
        dropped, primary, additional = reconcile_photos(existing, removed_photos, stored)

        for key, value in schema.model_dump(exclude={"id_key"} | MANAGED_FIELDS).items():
            setattr(car, key, value)
        car.photo_path = primary
        car.additional_photos = encode_photo_list(additional)

        try:
            self.repository.commit()
        except Exception:
            self.discard_photos(stored)
            raise
        self.session.refresh(car)

        self.discard_photos(dropped)
        logger.info(
            f"Updated car id={id_key}: {len(stored)} photo(s) added, {len(dropped)} removed"
        )
        return self.schema.model_validate(car)

    def delete(self, id_key: int) -> None:
        """Delete a car with its orders and tires, then its photo files."""
        car = self.repository.find_model(id_key)
        paths = self.photo_paths(car)
        self.repository.remove(id_key)
        self.discard_photos(paths)
        logger.info(f"Deleted car id={id_key} and {len(paths)} photo(s)")

    @staticmethod
    def photo_paths(car: CarModel) -> List[str]:
        return current_photos(car.photo_path, car.additional_photos)

    def _validate_client(self, client_id: int):
        if not self._client_repository.exists(client_id):
            raise InstanceNotFoundError(f"Client with id {client_id} not found")

    def _store_uploads(self, photos: Sequence[PhotoUpload]) -> List[str]:
        """Store every non-empty upload; on failure remove what this call already wrote."""
        stored = []
        for photo in photos:
            if not photo.content:
                logger.debug(f"Skipping empty upload {photo.filename!r}")
                continue
            try:
                stored.append(self.photo_storage.store(photo.content, photo.filename))
            except PhotoStorageError:
                self.discard_photos(stored)
                raise
        return stored

    def discard_photos(self, paths: Iterable[str]) -> None:
        """Delete files one by one; a failure is logged and does not stop the rest."""
        for path in paths:
            try:
                self.photo_storage.delete(path)
            except PhotoStorageError as e:
                logger.warning(f"Could not delete photo {path}: {e}")
