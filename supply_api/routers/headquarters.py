from fastapi import APIRouter

from supply_api.models.headquarters import Headquarters
from supply_api.routers.crud import add_crud_routes
from supply_api.schemas.branch import HeadquartersCreate, HeadquartersRead, HeadquartersUpdate
from supply_api.services.crud_service import CrudService

router = APIRouter(prefix="/headquarters", tags=["Headquarters"])

add_crud_routes(
    router,
    CrudService(Headquarters, "Headquarters"),
    read_schema=HeadquartersRead,
    create_schema=HeadquartersCreate,
    update_schema=HeadquartersUpdate,
)


__all__ = ["router"]
