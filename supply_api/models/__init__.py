import importlib

from supply_api.models.branch import Branch
from supply_api.models.delivery import Delivery
from supply_api.models.headquarters import Headquarters
from supply_api.models.order import Order
from supply_api.models.order_detail import OrderDetail
from supply_api.models.product import Product
from supply_api.models.supplier import Supplier


def import_all_models() -> None:
    for module_name in (
        "supply_api.models.branch",
        "supply_api.models.delivery",
        "supply_api.models.headquarters",
        "supply_api.models.order",
        "supply_api.models.order_detail",
        "supply_api.models.product",
        "supply_api.models.supplier",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Branch",
    "Delivery",
    "Headquarters",
    "Order",
    "OrderDetail",
    "Product",
    "Supplier",
    "import_all_models",
]
