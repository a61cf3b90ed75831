from sqlalchemy import Column, Integer, String

from supply_api.database.base import Base


class Headquarters(Base):
    __tablename__ = "headquarters"

    headquarters_id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String)
    address = Column(String)
    contact_person = Column(String)
    email = Column(String)
    phone = Column(String)


__all__ = ["Headquarters"]
