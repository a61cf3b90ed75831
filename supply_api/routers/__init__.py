from supply_api.routers.branches import router as branches_router
from supply_api.routers.deliveries import router as deliveries_router
from supply_api.routers.headquarters import router as headquarters_router
from supply_api.routers.health import router as health_router
from supply_api.routers.order_details import router as order_details_router
from supply_api.routers.orders import router as orders_router
from supply_api.routers.products import router as products_router
from supply_api.routers.search import router as search_router
from supply_api.routers.suppliers import router as suppliers_router

API_ROUTERS = (
    headquarters_router,
    branches_router,
    suppliers_router,
    products_router,
    orders_router,
    order_details_router,
    deliveries_router,
    search_router,
)

__all__ = [
    "API_ROUTERS",
    "branches_router",
    "deliveries_router",
    "headquarters_router",
    "health_router",
    "order_details_router",
    "orders_router",
    "products_router",
    "search_router",
    "suppliers_router",
]
