from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String

from supply_api.database.base import Base


class Delivery(Base):
    __tablename__ = "deliveries"

    delivery_id = Column(Integer, primary_key=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.supplier_id"), nullable=False)

    delivery_date = Column(Date, nullable=False)
    name = Column(String, nullable=False)
    description = Column(String)
    status = Column(String, nullable=False, default="pending")

    __table_args__ = (
        Index("idx_deliveries_supplier", "supplier_id"),
    )


__all__ = ["Delivery"]
