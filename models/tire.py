from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class TireModel(BaseModel):
    __tablename__ = "tires"

    car_id = Column(Integer, ForeignKey("cars.id_key", ondelete="CASCADE"), index=True, nullable=False)
    tire_type = Column(String(50), nullable=False)
    seasonality = Column(String(50), nullable=False)
    manufacturer = Column(String(50), nullable=False)
    tire_model = Column(String(50), nullable=False)
    size = Column(String(20), nullable=False)
    load_index = Column(Integer, nullable=False, default=0)
    wear_percentage = Column(Integer, nullable=False, default=0)
    pressure = Column(Numeric(3, 1, asdecimal=False), nullable=False, default=0.0)

    car = relationship("CarModel", back_populates="tires", lazy="select")

    __table_args__ = (
        CheckConstraint("wear_percentage >= 0 AND wear_percentage <= 100", name="ck_tires_wear_percentage"),
        CheckConstraint("pressure >= 0 AND pressure <= 10", name="ck_tires_pressure"),
    )
