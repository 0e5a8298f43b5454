from sqlalchemy import CheckConstraint, Column, Float, Integer, String
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class ServiceModel(BaseModel):
    __tablename__ = "services"

    service_code = Column(Integer, unique=True, index=True, nullable=False)
    service_name = Column(String(100), nullable=False)
    service_cost = Column(Float, nullable=False, default=0.0)

    completed_works = relationship("CompletedWorkModel", back_populates="service", lazy="select")

    __table_args__ = (
        CheckConstraint("service_cost >= 0 AND service_cost <= 1000000", name="ck_services_cost"),
    )
