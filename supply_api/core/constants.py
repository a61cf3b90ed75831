SEARCH_ENTITIES = ("products", "suppliers", "orders")

ORDER_STATUS_PENDING = "pending"

SEARCH_INDEXES = (
    ("idx_products_name", "products", "name"),
    ("idx_products_sku", "products", "sku"),
    ("idx_suppliers_name", "suppliers", "name"),
    ("idx_orders_name", "orders", "name"),
)
