from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String

from supply_api.core.constants import ORDER_STATUS_PENDING
from supply_api.database.base import Base


class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True)
    branch_id = Column(Integer, ForeignKey("branches.branch_id"), nullable=False)

    order_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    name = Column(String, nullable=False, default="")
    description = Column(String, nullable=False, default="")
    status = Column(String, nullable=False, default=ORDER_STATUS_PENDING)

    __table_args__ = (
        Index("idx_orders_branch", "branch_id"),
    )


__all__ = ["Order"]
