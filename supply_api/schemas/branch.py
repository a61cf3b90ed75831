from typing import Optional

from supply_api.schemas.base import CamelModel


class HeadquartersBase(CamelModel):
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class HeadquartersCreate(HeadquartersBase):
    pass


class HeadquartersUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class HeadquartersRead(HeadquartersBase):
    headquarters_id: int


class BranchBase(CamelModel):
    headquarters_id: int
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class BranchCreate(BranchBase):
    pass


class BranchUpdate(CamelModel):
    headquarters_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class BranchRead(BranchBase):
    branch_id: int
