from sqlalchemy import Column, ForeignKey, Index, Integer, String

from supply_api.database.base import Base


class Branch(Base):
    __tablename__ = "branches"

    branch_id = Column(Integer, primary_key=True)
    headquarters_id = Column(Integer, ForeignKey("headquarters.headquarters_id"), nullable=False)

    name = Column(String, nullable=False)
    description = Column(String)
    address = Column(String)
    contact_person = Column(String)
    email = Column(String)
    phone = Column(String)

    __table_args__ = (
        Index("idx_branches_headquarters", "headquarters_id"),
    )


__all__ = ["Branch"]
