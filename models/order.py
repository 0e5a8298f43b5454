from sqlalchemy import Column, DateTime, Integer, ForeignKey, func
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class OrderModel(BaseModel):
    __tablename__ = "orders"

    order_number = Column(Integer, unique=True, index=True, nullable=False)
    car_id = Column(Integer, ForeignKey("cars.id_key", ondelete="CASCADE"), index=True, nullable=False)
    master_id = Column(Integer, ForeignKey("masters.id_key", ondelete="SET NULL"), index=True, nullable=True)
    order_date = Column(DateTime, index=True, nullable=False, default=func.now())
    payment_date = Column(DateTime, nullable=True)

    car = relationship("CarModel", back_populates="orders", lazy="select")
    master = relationship("MasterModel", back_populates="orders", lazy="select")
    # Joined on order_number, not id_key.
    completed_works = relationship("CompletedWorkModel", back_populates="order", cascade="all, delete-orphan",
                                   lazy="select")
