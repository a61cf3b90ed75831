from sqlalchemy import Column, Float, ForeignKey, Index, Integer, String

from supply_api.database.base import Base


class OrderDetail(Base):
    __tablename__ = "order_details"

    order_detail_id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    # Copied from products.price when the order is placed.
    unit_price = Column(Float, nullable=False)
    notes = Column(String, nullable=False, default="")

    __table_args__ = (
        Index("idx_order_details_order", "order_id"),
        Index("idx_order_details_product", "product_id"),
    )


__all__ = ["OrderDetail"]
