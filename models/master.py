from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class MasterModel(BaseModel):
    __tablename__ = "masters"

    full_name = Column(String(100), index=True, nullable=False)
    phone = Column(String(20), nullable=True)
    specialization = Column(String(100), nullable=True)

    orders = relationship("OrderModel", back_populates="master", lazy="select")
    completed_works = relationship("CompletedWorkModel", back_populates="master", lazy="select")
