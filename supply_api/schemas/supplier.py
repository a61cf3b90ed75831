from typing import Optional

from supply_api.schemas.base import CamelModel


class SupplierBase(CamelModel):
    name: str
    description: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    active: bool = True
    verified: bool = False


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    active: Optional[bool] = None
    verified: Optional[bool] = None


class SupplierRead(SupplierBase):
    supplier_id: int
