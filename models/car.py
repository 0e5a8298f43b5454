from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class CarModel(BaseModel):
    __tablename__ = "cars"

    client_id = Column(Integer, ForeignKey("clients.id_key", ondelete="CASCADE"), index=True, nullable=False)
    brand = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    manufacture_year = Column(Integer, nullable=False)
    license_plate = Column(String(20), index=True, nullable=False)
    vin = Column(String(17), nullable=True)
    photo_path = Column(String(255), nullable=True)
    # Encoded with utils.photo_list.encode_photo_list
    additional_photos = Column(Text, nullable=True)
    version_id = Column(Integer, nullable=False)

    client = relationship("ClientModel", back_populates="cars", lazy="select")
    orders = relationship("OrderModel", back_populates="car", cascade="all, delete-orphan", lazy="select")
    tires = relationship("TireModel", back_populates="car", cascade="all, delete-orphan", lazy="select")

    __mapper_args__ = {"version_id_col": version_id}
