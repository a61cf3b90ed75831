from typing import Optional

from pydantic import Field

from supply_api.schemas.base import CamelModel


class ProductBase(CamelModel):
    supplier_id: int
    name: str
    description: Optional[str] = None
    price: float = Field(ge=0)
    sku: str
    unit: str = "piece"
    img_name: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(CamelModel):
    supplier_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    sku: Optional[str] = None
    unit: Optional[str] = None
    img_name: Optional[str] = None


class ProductRead(ProductBase):
    product_id: int
