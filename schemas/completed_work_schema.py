"""CompletedWork schema."""
from pydantic import Field

from schemas.base_schema import BaseSchema


class CompletedWorkSchema(BaseSchema):
    """One service rendered against one order, performed by one master."""

    order_number: int = Field(..., gt=0, description="Order number (not the order ID)")
    service_code: int = Field(..., gt=0, description="Service code")
    master_id: int = Field(..., gt=0, description="Master ID")
