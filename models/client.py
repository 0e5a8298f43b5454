from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class ClientModel(BaseModel):
    __tablename__ = "clients"

    full_name = Column(String(100), index=True, nullable=False)
    phone = Column(String(20), nullable=False)
    email = Column(String(100), nullable=True)

    cars = relationship("CarModel", back_populates="client", cascade="all, delete-orphan", lazy="select")
