from sqlalchemy import Boolean, Column, Integer, String

from supply_api.database.base import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    supplier_id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String)
    contact_person = Column(String)
    email = Column(String)
    phone = Column(String)

    active = Column(Boolean, nullable=False, default=True)
    verified = Column(Boolean, nullable=False, default=False)


__all__ = ["Supplier"]
