import logging
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from supply_api.core.constants import SEARCH_INDEXES

logger = logging.getLogger(__name__)

_SQLITE_BUSY_TIMEOUT_SECONDS = 30
_SQLITE_BUSY_TIMEOUT_MS = _SQLITE_BUSY_TIMEOUT_SECONDS * 1000

# SQLite's built-in LOWER() only folds ASCII.
SQLITE_UNICODE_LOWER = "py_lower"


def _unicode_lower(value):
    if value is None:
        return None
    return str(value).lower()


def _is_sqlite_memory(db_url) -> bool:
    sqlite_db = db_url.database
    if sqlite_db in (None, "", ":memory:"):
        return True
    return db_url.query.get("mode") == "memory"


def create_db_engine(database_url: str) -> Engine:
    db_url = make_url(database_url)
    is_sqlite = db_url.get_backend_name() == "sqlite"
    is_sqlite_memory = is_sqlite and _is_sqlite_memory(db_url)

    connect_args = {}
    engine_kwargs: dict[str, object] = dict(pool_pre_ping=True)
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": _SQLITE_BUSY_TIMEOUT_SECONDS}
        if is_sqlite_memory:
            engine_kwargs.update(poolclass=StaticPool)

    engine = create_engine(database_url, connect_args=connect_args, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, _connection_record):
            dbapi_connection.create_function(
                SQLITE_UNICODE_LOWER, 1, _unicode_lower, deterministic=True
            )
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.execute(f"PRAGMA busy_timeout={_SQLITE_BUSY_TIMEOUT_MS}")
                if not is_sqlite_memory:
                    try:
                        cursor.execute("PRAGMA journal_mode=WAL")
                        cursor.execute("PRAGMA synchronous=NORMAL")
                    except sqlite3.DatabaseError:
                        pass
            finally:
                cursor.close()

    return engine


def ensure_search_indexes(engine: Engine) -> None:
    with engine.connect() as conn:
        for index_name, table_name, column_name in SEARCH_INDEXES:
            try:
                with conn.begin():
                    # noinspection SqlNoDataSourceInspection
                    conn.exec_driver_sql(
                        f'CREATE INDEX IF NOT EXISTS "{index_name}" '
                        f'ON "{table_name}" ("{column_name}")'
                    )
            except SQLAlchemyError:
                logger.warning(
                    "Unable to create search index %s on %s(%s).",
                    index_name,
                    table_name,
                    column_name,
                )
