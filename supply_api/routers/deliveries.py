from fastapi import APIRouter

from supply_api.models.delivery import Delivery
from supply_api.routers.crud import add_crud_routes
from supply_api.schemas.delivery import DeliveryCreate, DeliveryRead, DeliveryUpdate
from supply_api.services.crud_service import CrudService

router = APIRouter(prefix="/deliveries", tags=["Deliveries"])

add_crud_routes(
    router,
    CrudService(Delivery, "Delivery"),
    read_schema=DeliveryRead,
    create_schema=DeliveryCreate,
    update_schema=DeliveryUpdate,
)


__all__ = ["router"]
