from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class CompletedWorkModel(BaseModel):
    __tablename__ = "completed_works"

    order_number = Column(Integer, ForeignKey("orders.order_number", ondelete="CASCADE"), index=True,
                          nullable=False)
    service_code = Column(Integer, ForeignKey("services.service_code", ondelete="RESTRICT"), index=True,
                          nullable=False)
    master_id = Column(Integer, ForeignKey("masters.id_key", ondelete="RESTRICT"), index=True, nullable=False)

    order = relationship("OrderModel", back_populates="completed_works", lazy="select")
    service = relationship("ServiceModel", back_populates="completed_works", lazy="select")
    master = relationship("MasterModel", back_populates="completed_works", lazy="select")
