from supply_api.services.crud_service import CrudService
from supply_api.services.order_service import create_cart_order
from supply_api.services.search_service import get_suggestions, interleave

__all__ = [
    "CrudService",
    "create_cart_order",
    "get_suggestions",
    "interleave",
]
