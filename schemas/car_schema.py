"""Car schema with validation."""
from typing import List, Optional

from pydantic import Field, field_validator

from schemas.base_schema import BaseSchema
from utils.photo_list import decode_photo_list


class CarSchema(BaseSchema):
    """
    Schema for Car entity.

    The photo fields are read-only from the API's point of view: they are
    filled from the stored entity and changed only through photo uploads and
    removals.
    """

    client_id: int = Field(..., gt=0, description="Owner client ID (required)")
    brand: str = Field(..., min_length=1, max_length=50, description="Make")
    model: str = Field(..., min_length=1, max_length=50, description="Model")
    manufacture_year: int = Field(..., ge=1900, le=2100, description="Year of manufacture")
    license_plate: str = Field(..., min_length=1, max_length=20, description="License plate")
    vin: Optional[str] = Field(None, max_length=17, description="VIN code")
    photo_path: Optional[str] = Field(None, description="Primary photo path")
    additional_photos: List[str] = Field(default_factory=list, description="Additional photo paths")
    version_id: Optional[int] = Field(None, description="Concurrency token read by the client")

    @field_validator("additional_photos", mode="before")
    @classmethod
    def decode_stored_photos(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return decode_photo_list(value)
        return value
