import logging
from collections.abc import Mapping
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from supply_api.core.constants import ORDER_STATUS_PENDING
from supply_api.core.errors import ProductNotFoundError, ValidationError
from supply_api.core.validation import parse_int, require_at_least
from supply_api.models.order import Order
from supply_api.models.order_detail import OrderDetail
from supply_api.models.product import Product
from supply_api.schemas.order import (
    CartItem,
    CartOrderRequest,
    CartOrderResponse,
    OrderDetailRead,
    OrderRead,
)
from supply_api.schemas.product import ProductRead

logger = logging.getLogger(__name__)


def parse_cart_request(payload) -> tuple[int, list]:
    """Check the branch and the items list; items themselves are checked during resolution."""
    if not isinstance(payload, Mapping):
        payload = {}

    branch_id = payload.get("branchId")
    if not branch_id:
        raise ValidationError("branchId is required")
    branch_id = parse_int(branch_id, "branchId must be an integer")

    raw_items = payload.get("items")
    if not isinstance(raw_items, list) or not raw_items:
        raise ValidationError("items array must not be empty")

    return branch_id, raw_items


def parse_cart_item(raw_item) -> CartItem:
    if not isinstance(raw_item, Mapping):
        raise ValidationError("each item must be an object with productId and quantity")
    product_id = parse_int(raw_item.get("productId"), "productId must be an integer")
    quantity = parse_int(raw_item.get("quantity"), "quantity must be at least 1")
    require_at_least(quantity, 1, "quantity must be at least 1")
    return CartItem(product_id=product_id, quantity=quantity)


def resolve_cart_items(db: Session, raw_items: list) -> list[tuple[CartItem, Product]]:
    """Check and resolve items in input order, stopping at the first bad item or missing product."""
    products: dict[int, Product] = {}
    resolved = []
    for raw_item in raw_items:
        item = parse_cart_item(raw_item)
        product = products.get(item.product_id)
        if product is None:
            product = db.get(Product, item.product_id)
            if product is None:
                raise ProductNotFoundError(item.product_id)
            products[item.product_id] = product
        resolved.append((item, product))
    return resolved


def create_cart_order(db: Session, payload) -> CartOrderResponse:
    branch_id, raw_items = parse_cart_request(payload)
    resolved = resolve_cart_items(db, raw_items)
    cart = CartOrderRequest(branch_id=branch_id, items=[item for item, _ in resolved])

    details = []
    try:
        order = Order(
            branch_id=cart.branch_id,
            order_date=datetime.now(timezone.utc),
            status=ORDER_STATUS_PENDING,
            name="",
            description="",
        )
        db.add(order)
        db.flush()

        for item, product in resolved:
            detail = OrderDetail(
                order_id=order.order_id,
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=product.price,
                notes="",
            )
            db.add(detail)
            details.append((detail, product))
        db.flush()
        db.commit()
    except Exception:
        db.rollback()
        logger.warning(
            "Rolled back cart order for branch %s with %s items",
            cart.branch_id,
            len(cart.items),
        )
        raise

    db.refresh(order)
    logger.info(
        "Created order %s for branch %s with %s details",
        order.order_id,
        order.branch_id,
        len(details),
    )

    base = OrderRead.model_validate(order).model_dump()
    base["details"] = [
        {
            **OrderDetailRead.model_validate(detail).model_dump(),
            "product": ProductRead.model_validate(product).model_dump(),
        }
        for detail, product in details
    ]
    return CartOrderResponse(**base)


__all__ = [
    "create_cart_order",
    "parse_cart_item",
    "parse_cart_request",
    "resolve_cart_items",
]
