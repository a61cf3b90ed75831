from fastapi import APIRouter

from supply_api.models.branch import Branch
from supply_api.routers.crud import add_crud_routes
from supply_api.schemas.branch import BranchCreate, BranchRead, BranchUpdate
from supply_api.services.crud_service import CrudService

router = APIRouter(prefix="/branches", tags=["Branches"])

add_crud_routes(
    router,
    CrudService(Branch, "Branch"),
    read_schema=BranchRead,
    create_schema=BranchCreate,
    update_schema=BranchUpdate,
)


__all__ = ["router"]
