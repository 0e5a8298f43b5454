"""Master schema with validation."""
from typing import Optional

from pydantic import Field

from schemas.base_schema import BaseSchema


class MasterSchema(BaseSchema):
    """Schema for Master entity."""

    full_name: str = Field(..., min_length=1, max_length=100, description="Master full name (required)")
    phone: Optional[str] = Field(None, max_length=20)
    specialization: Optional[str] = Field(None, max_length=100)
