"""Client schema with validation."""
from typing import Optional

from pydantic import Field

from schemas.base_schema import BaseSchema


class ClientSchema(BaseSchema):
    """Schema for Client entity with validations."""

    full_name: str = Field(..., min_length=1, max_length=100, description="Client full name (required)")
    phone: str = Field(..., min_length=1, max_length=20, description="Contact phone (required)")
    email: Optional[str] = Field(None, max_length=100, description="Contact e-mail")
