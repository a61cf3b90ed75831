from supply_api.database.session import get_db, get_session_factory

__all__ = ["get_db", "get_session_factory"]
