"""Order schemas."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.base_schema import BaseSchema


class OrderSchema(BaseSchema):
    """Schema for Order entity. The order number is assigned when omitted."""

    order_number: Optional[int] = Field(None, gt=0, description="External order number")
    car_id: int = Field(..., gt=0, description="Car ID (required)")
    master_id: Optional[int] = Field(None, gt=0, description="Assigned master ID")
    order_date: Optional[datetime] = Field(None, description="Order date, defaults to now")
    payment_date: Optional[datetime] = Field(None, description="Payment date, empty while unpaid")


class OrderStatusSchema(BaseModel):
    order_number: int
    is_completed: bool
