"""Tire schema with validation."""
from pydantic import Field

from schemas.base_schema import BaseSchema


class TireSchema(BaseSchema):
    """Schema for Tire entity with physical attribute ranges."""

    car_id: int = Field(..., gt=0, description="Car ID (required)")
    tire_type: str = Field(..., min_length=1, max_length=50)
    seasonality: str = Field(..., min_length=1, max_length=50)
    manufacturer: str = Field(..., min_length=1, max_length=50)
    tire_model: str = Field(..., min_length=1, max_length=50)
    size: str = Field(..., min_length=1, max_length=20)
    load_index: int = Field(0, ge=0)
    wear_percentage: int = Field(0, ge=0, le=100, description="Wear, 0 to 100 %")
    pressure: float = Field(0.0, ge=0.0, le=10.0, description="Pressure, 0.0 to 10.0 bar")
