from datetime import datetime
from typing import List, Optional

from pydantic import Field

from supply_api.schemas.base import CamelModel
from supply_api.schemas.product import ProductRead


class OrderBase(CamelModel):
    branch_id: int
    order_date: datetime
    name: str = ""
    description: str = ""
    status: str


class OrderUpdate(CamelModel):
    branch_id: Optional[int] = None
    order_date: Optional[datetime] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class OrderRead(OrderBase):
    order_id: int


class OrderDetailBase(CamelModel):
    order_id: int
    product_id: int
    quantity: int = Field(ge=1)
    unit_price: float = Field(ge=0)
    notes: str = ""


class OrderDetailCreate(OrderDetailBase):
    pass


class OrderDetailUpdate(CamelModel):
    quantity: Optional[int] = Field(default=None, ge=1)
    unit_price: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


class OrderDetailRead(OrderDetailBase):
    order_detail_id: int


class CartItem(CamelModel):
    product_id: int
    quantity: int


class CartOrderRequest(CamelModel):
    branch_id: int
    items: List[CartItem]


class OrderDetailWithProduct(OrderDetailRead):
    product: ProductRead


class CartOrderResponse(OrderRead):
    details: List[OrderDetailWithProduct] = Field(default_factory=list)
