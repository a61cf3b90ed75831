from supply_api.database.base import Base
from supply_api.database.engine import create_db_engine, ensure_search_indexes
from supply_api.database.session import create_session_factory, get_db, get_session_factory

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "ensure_search_indexes",
    "get_db",
    "get_session_factory",
]
