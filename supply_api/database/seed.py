import logging
from datetime import date, datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from supply_api.models.branch import Branch
from supply_api.models.delivery import Delivery
from supply_api.models.headquarters import Headquarters
from supply_api.models.order import Order
from supply_api.models.order_detail import OrderDetail
from supply_api.models.product import Product
from supply_api.models.supplier import Supplier

logger = logging.getLogger(__name__)


def seed_demo_data(db: Session) -> bool:
    """Insert a small demo dataset. Returns False when headquarters already exist."""
    has_headquarters = db.execute(select(Headquarters.headquarters_id).limit(1)).first()
    if has_headquarters:
        logger.info("Seed skipped: headquarters already exist.")
        return False

    db.add(
        Headquarters(
            headquarters_id=1,
            name="OctoCAT Supply HQ",
            description="Head office",
            address="1 Harbor Way",
            contact_person="Mona Octo",
            email="hq@octocat-supply.com",
            phone="555-0100",
        )
    )
    db.flush()

    db.add_all(
        [
            Branch(
                branch_id=1,
                headquarters_id=1,
                name="Downtown Branch",
                description="Main retail branch",
                address="123 Main St",
                contact_person="John Doe",
                email="downtown@octocat-supply.com",
                phone="555-0110",
            ),
            Branch(
                branch_id=2,
                headquarters_id=1,
                name="Harbor Branch",
                description="Warehouse branch",
                address="9 Dock Rd",
                contact_person="Jane Roe",
                email="harbor@octocat-supply.com",
                phone="555-0120",
            ),
        ]
    )
    db.add_all(
        [
            Supplier(
                supplier_id=1,
                name="Widget Supplier Inc.",
                description="Widget supplier",
                contact_person="John Widget",
                email="john@widget.com",
                phone="555-0200",
                verified=True,
            ),
            Supplier(
                supplier_id=2,
                name="Gadget Corp",
                description="Gadget supplier",
                contact_person="Jane Gadget",
                email="contact@gadget.com",
                phone="555-0300",
            ),
        ]
    )
    db.flush()

    products = [
        Product(product_id=5, supplier_id=1, name="Widget A", description="First widget",
                price=29.99, sku="WDG-001", unit="piece"),
        Product(product_id=12, supplier_id=2, name="Gadget B", description="Second gadget",
                price=49.99, sku="GDG-002", unit="box"),
        Product(product_id=15, supplier_id=1, name="Super Widget", description="Premium widget",
                price=99.99, sku="WDG-SUPER", unit="piece"),
    ]
    db.add_all(products)
    db.flush()

    order = Order(
        order_id=1,
        branch_id=1,
        order_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        name="Widget Order",
        description="Order for widgets",
        status="pending",
    )
    db.add(order)
    db.flush()
    db.add(
        OrderDetail(
            order_id=order.order_id,
            product_id=5,
            quantity=10,
            unit_price=29.99,
            notes="",
        )
    )
    db.add(
        Delivery(
            supplier_id=1,
            delivery_date=date(2024, 1, 5),
            name="Widget Delivery",
            description="First widget shipment",
            status="delivered",
        )
    )
    db.commit()
    logger.info("Seed data created.")
    return True


__all__ = ["seed_demo_data"]
