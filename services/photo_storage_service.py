"""
Local-disk storage for car photos.

Photos live under ``<UPLOADS_ROOT>/uploads/cars`` and are referenced from the
database by their root-relative path, e.g. ``/uploads/cars/<hex>.jpg``, which
is also the URL they are served from.
"""
import logging
import os
import uuid
from contextlib import suppress
from pathlib import Path
from typing import NamedTuple, Optional, Union

from config.settings import get_settings

logger = logging.getLogger(__name__)

CAR_PHOTOS_DIR = "uploads/cars"


class PhotoStorageError(Exception):
    """Raised when a photo cannot be written or removed."""


class PhotoUpload(NamedTuple):
    """An uploaded file already read into memory."""
    content: bytes
    filename: Optional[str] = None


class PhotoStorageService:
    """Store and delete photo files under a fixed uploads root."""

    def __init__(self, root: Union[str, Path, None] = None, subdir: str = CAR_PHOTOS_DIR):
        self.root = Path(root if root is not None else get_settings().UPLOADS_ROOT).resolve()
        self.subdir = subdir.strip("/")

    @property
    def directory(self) -> Path:
        return self.root / self.subdir

    def _ensure_dir(self):
        """Ensure the photos directory exists"""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PhotoStorageError(f"Cannot create photo directory {self.directory}: {e}") from e

    def resolve(self, path: str) -> Path:
        """Absolute file location of a root-relative photo path."""
        full_path = (self.root / path.lstrip("/")).resolve()
        if full_path == self.root or self.root not in full_path.parents:
            raise PhotoStorageError(f"Photo path {path!r} is outside the uploads root")
        return full_path

    def store(self, content: bytes, original_filename: Optional[str] = None) -> str:
        """
        Write a photo under a freshly generated unique name.

        Args:
            content: Raw file bytes
            original_filename: Client-side name, only its extension is kept

        Returns:
            Root-relative path of the stored file
        """
        self._ensure_dir()

        extension = Path(original_filename or "").suffix.lower()
        file_name = f"{uuid.uuid4().hex}{extension}"
        file_path = self.directory / file_name

        try:
            with open(file_path, "wb") as f:
                f.write(content)
        except OSError as e:
            with suppress(OSError):
                file_path.unlink(missing_ok=True)
            raise PhotoStorageError(f"Cannot write photo {file_name}: {e}") from e

        logger.info(f"Stored photo {file_name} ({len(content)} bytes)")
        return f"/{self.subdir}/{file_name}"

    def delete(self, path: Optional[str]) -> None:
        """Remove a stored photo. A missing file is not an error."""
        if not path:
            return
        full_path = self.resolve(path)
        try:
            os.remove(full_path)
        except FileNotFoundError:
            logger.debug(f"Photo {path} already absent")
            return
        except OSError as e:
            raise PhotoStorageError(f"Cannot delete photo {path}: {e}") from e
        logger.info(f"Deleted photo {path}")

    def exists(self, path: str) -> bool:
        try:
            return self.resolve(path).is_file()
        except PhotoStorageError:
            return False

    def read(self, path: str) -> bytes:
        try:
            with open(self.resolve(path), "rb") as f:
                return f.read()
        except OSError as e:
            raise PhotoStorageError(f"Cannot read photo {path}: {e}") from e


def get_photo_storage() -> PhotoStorageService:
    """Dependency providing the photo storage configured for the application."""
    return PhotoStorageService()
