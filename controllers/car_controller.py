"""Car controller: multipart forms with photo uploads."""
import json
from typing import List, Optional, Union

from fastapi import Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile as StarletteUploadFile

from config.database import get_db
from config.settings import get_settings
from controllers.base_controller_impl import BaseControllerImpl
from schemas.car_schema import CarSchema
from services.car_service import CarService
from services.photo_storage_service import PhotoStorageService, PhotoUpload, get_photo_storage


def get_car_service(
    db: Session = Depends(get_db),
    photo_storage: PhotoStorageService = Depends(get_photo_storage),
) -> CarService:
    return CarService(db, photo_storage)


async def read_uploads(files: Optional[List[Union[UploadFile, str]]]) -> List[PhotoUpload]:
    """
    Read uploaded files into memory, rejecting non-images and oversized files.

    An empty file input arrives as a plain string part and is skipped, like
    any zero-length upload.
    """
    max_size = get_settings().MAX_UPLOAD_SIZE
    uploads = []
    for file in files or []:
        if not isinstance(file, StarletteUploadFile):
            continue
        content = await file.read()
        if not content:
            continue
        if file.content_type and not file.content_type.startswith("image/"):
            raise ValueError(f"File {file.filename!r} must be an image")
        if len(content) > max_size:
            raise ValueError(f"File {file.filename!r} is too large (max {max_size} bytes)")
        uploads.append(PhotoUpload(content=content, filename=file.filename))
    return uploads


def parse_removed_photos(values: Optional[List[str]]) -> List[str]:
    """
    Removal paths arrive as repeated form fields or as a single JSON array
    string; both forms may be mixed.
    """
    paths = []
    for value in values or []:
        value = value.strip()
        if value.startswith("["):
            try:
                decoded = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(f"removed_photos is not a valid JSON array: {e}") from e
            paths.extend(str(p) for p in decoded if p)
        elif value:
            paths.append(value)
    return paths


class CarController(BaseControllerImpl):
    """
    Controller for Car entity.

    Create and update take multipart form data: the car fields, any number of
    ``photos`` files and, on update, the ``removed_photos`` paths.
    """

    def __init__(self):
        super().__init__(
            schema=CarSchema,
            service_dependency=get_car_service,
            tags=["Cars"]
        )

    def _register_routes(self):
        self._register_get_all()
        self._register_get_one()
        self._register_delete()

        @self.router.post("/", response_model=CarSchema, status_code=status.HTTP_201_CREATED)
        async def create(
            client_id: int = Form(...),
            brand: str = Form(...),
            model: str = Form(...),
            manufacture_year: int = Form(...),
            license_plate: str = Form(...),
            vin: Optional[str] = Form(None),
            photos: Optional[List[Union[UploadFile, str]]] = File(None),
            service: CarService = Depends(self.service_dependency),
        ):
            """Create a car; the first photo becomes the primary one."""
            schema_in = CarSchema(
                client_id=client_id,
                brand=brand,
                model=model,
                manufacture_year=manufacture_year,
                license_plate=license_plate,
                vin=vin or None,
            )
            uploads = await read_uploads(photos)
            return service.save(schema_in, uploads)

        @self.router.put("/{id_key}", response_model=CarSchema, status_code=status.HTTP_200_OK)
        async def update(
            id_key: int,
            client_id: int = Form(...),
            brand: str = Form(...),
            model: str = Form(...),
            manufacture_year: int = Form(...),
            license_plate: str = Form(...),
            vin: Optional[str] = Form(None),
            version_id: Optional[int] = Form(None),
            removed_photos: Optional[List[str]] = Form(None),
            photos: Optional[List[Union[UploadFile, str]]] = File(None),
            service: CarService = Depends(self.service_dependency),
        ):
            """Update a car, appending new photos and removing the listed ones."""
            schema_in = CarSchema(
                client_id=client_id,
                brand=brand,
                model=model,
                manufacture_year=manufacture_year,
                license_plate=license_plate,
                vin=vin or None,
                version_id=version_id,
            )
            uploads = await read_uploads(photos)
            return service.update(id_key, schema_in, uploads, parse_removed_photos(removed_photos))

