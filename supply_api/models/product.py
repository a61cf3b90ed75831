from sqlalchemy import Column, Float, ForeignKey, Index, Integer, String

from supply_api.database.base import Base


class Product(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.supplier_id"), nullable=False)

    name = Column(String, nullable=False)
    description = Column(String)
    price = Column(Float, nullable=False)
    sku = Column(String, nullable=False)
    unit = Column(String, nullable=False, default="piece")
    img_name = Column(String)

    __table_args__ = (
        Index("idx_products_supplier", "supplier_id"),
    )


__all__ = ["Product"]
