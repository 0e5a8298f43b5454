from models.base_model import BaseModel, base
from models.client import ClientModel
from models.car import CarModel
from models.tire import TireModel
from models.order import OrderModel
from models.service import ServiceModel
from models.master import MasterModel
from models.completed_work import CompletedWorkModel

__all__ = [
    "base",
    "BaseModel",
    "ClientModel",
    "CarModel",
    "TireModel",
    "OrderModel",
    "ServiceModel",
    "MasterModel",
    "CompletedWorkModel",
]
