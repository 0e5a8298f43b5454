"""Service schema with validation."""
from pydantic import Field

from schemas.base_schema import BaseSchema


class ServiceSchema(BaseSchema):
    """Schema for a billable Service."""

    service_code: int = Field(..., gt=0, description="Service code (unique)")
    service_name: str = Field(..., min_length=1, max_length=100, description="Service name (required)")
    service_cost: float = Field(..., ge=0, le=1_000_000, description="Cost, 0 to 1 000 000")
