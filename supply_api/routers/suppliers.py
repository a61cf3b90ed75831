from fastapi import APIRouter

from supply_api.models.supplier import Supplier
from supply_api.routers.crud import add_crud_routes
from supply_api.schemas.supplier import SupplierCreate, SupplierRead, SupplierUpdate
from supply_api.services.crud_service import CrudService

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])

add_crud_routes(
    router,
    CrudService(Supplier, "Supplier"),
    read_schema=SupplierRead,
    create_schema=SupplierCreate,
    update_schema=SupplierUpdate,
)


__all__ = ["router"]
