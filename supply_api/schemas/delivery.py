from datetime import date
from typing import Optional

from supply_api.schemas.base import CamelModel


class DeliveryBase(CamelModel):
    supplier_id: int
    delivery_date: date
    name: str
    description: Optional[str] = None
    status: str = "pending"


class DeliveryCreate(DeliveryBase):
    pass


class DeliveryUpdate(CamelModel):
    supplier_id: Optional[int] = None
    delivery_date: Optional[date] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class DeliveryRead(DeliveryBase):
    delivery_id: int
