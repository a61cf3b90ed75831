from fastapi import APIRouter

from supply_api.models.product import Product
from supply_api.routers.crud import add_crud_routes
from supply_api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from supply_api.services.crud_service import CrudService

router = APIRouter(prefix="/products", tags=["Products"])

add_crud_routes(
    router,
    CrudService(Product, "Product"),
    read_schema=ProductRead,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
)


__all__ = ["router"]
