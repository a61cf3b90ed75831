from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from supply_api.core.errors import ProductNotFoundError
from supply_api.dependencies import get_db
from supply_api.models.order import Order
from supply_api.routers.crud import add_crud_routes
from supply_api.schemas.order import CartOrderResponse, OrderRead, OrderUpdate
from supply_api.services.crud_service import CrudService
from supply_api.services.order_service import create_cart_order

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("", response_model=CartOrderResponse, status_code=status.HTTP_201_CREATED)
def create_order_from_cart(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Create an order and its details from a shopping cart in one transaction."""
    try:
        return create_cart_order(db, payload)
    except ProductNotFoundError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Product not found", "productId": exc.product_id},
        )


add_crud_routes(
    router,
    CrudService(Order, "Order"),
    read_schema=OrderRead,
    update_schema=OrderUpdate,
)


__all__ = ["router"]
