from fastapi import APIRouter

from supply_api.models.order_detail import OrderDetail
from supply_api.routers.crud import add_crud_routes
from supply_api.schemas.order import OrderDetailCreate, OrderDetailRead, OrderDetailUpdate
from supply_api.services.crud_service import CrudService

router = APIRouter(prefix="/order-details", tags=["Order Details"])

add_crud_routes(
    router,
    CrudService(OrderDetail, "Order detail"),
    read_schema=OrderDetailRead,
    create_schema=OrderDetailCreate,
    update_schema=OrderDetailUpdate,
)


__all__ = ["router"]
