import logging
import math
from concurrent.futures import ThreadPoolExecutor
from itertools import islice, zip_longest
from typing import Iterable, Iterator, Optional, Sequence

from sqlalchemy import String, case, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from supply_api.core.dates import format_date
from supply_api.core.errors import handle_database_error
from supply_api.database.engine import SQLITE_UNICODE_LOWER
from supply_api.models.order import Order
from supply_api.models.product import Product
from supply_api.models.supplier import Supplier
from supply_api.schemas.search import SearchSuggestion

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"
_MISSING = object()


def _escape_like(value: str) -> str:
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def _lower_function(db: Session):
    if db.get_bind().dialect.name == "sqlite":
        unicode_lower = getattr(func, SQLITE_UNICODE_LOWER)
        return lambda column: unicode_lower(column, type_=String)
    return func.lower


def _relevance(lower, columns, query: str):
    """1 = exact match, 2 = prefix match, 3 = substring match."""
    escaped = _escape_like(query)
    lowered = [lower(column) for column in columns]
    exact = or_(*(column == query for column in lowered))
    prefix = or_(*(column.like(escaped + "%", escape=_LIKE_ESCAPE) for column in lowered))
    return case((exact, 1), (prefix, 2), else_=3).label("relevance")


def _contains(lower, columns, query: str):
    pattern = "%" + _escape_like(query) + "%"
    return or_(*(lower(column).like(pattern, escape=_LIKE_ESCAPE) for column in columns))


def search_products(db: Session, query: str, limit: int) -> list[SearchSuggestion]:
    query = query.lower()
    columns = (Product.name, Product.sku)
    lower = _lower_function(db)
    relevance = _relevance(lower, columns, query)
    stmt = (
        select(Product.product_id, Product.name, Product.sku, Product.price, relevance)
        .where(_contains(lower, columns, query))
        .order_by(relevance, Product.name)
        .limit(limit)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        handle_database_error(exc)

    return [
        SearchSuggestion(
            type="product",
            id=row.product_id,
            text=row.name,
            subtext="SKU: {} | ${:.2f}".format(row.sku, row.price),
            metadata={"price": row.price, "sku": row.sku},
        )
        for row in rows
    ]


def search_suppliers(db: Session, query: str, limit: int) -> list[SearchSuggestion]:
    query = query.lower()
    columns = (Supplier.name,)
    lower = _lower_function(db)
    relevance = _relevance(lower, columns, query)
    stmt = (
        select(Supplier.supplier_id, Supplier.name, Supplier.email, relevance)
        .where(_contains(lower, columns, query))
        .order_by(relevance, Supplier.name)
        .limit(limit)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        handle_database_error(exc)

    return [
        SearchSuggestion(
            type="supplier",
            id=row.supplier_id,
            text=row.name,
            subtext=row.email or "",
        )
        for row in rows
    ]


def search_orders(db: Session, query: str, limit: int) -> list[SearchSuggestion]:
    query = query.lower()
    columns = (Order.name,)
    lower = _lower_function(db)
    relevance = _relevance(lower, columns, query)
    stmt = (
        select(Order.order_id, Order.name, Order.order_date, Order.status, relevance)
        .where(_contains(lower, columns, query))
        .order_by(relevance, Order.order_date.desc())
        .limit(limit)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        handle_database_error(exc)

    return [
        SearchSuggestion(
            type="order",
            id=row.order_id,
            text=row.name,
            subtext="Status: {} | {}".format(row.status, format_date(row.order_date)),
        )
        for row in rows
    ]


ENTITY_SEARCHES = {
    "products": search_products,
    "suppliers": search_suppliers,
    "orders": search_orders,
}


def interleave(sequences: Iterable[Sequence], limit: int) -> Iterator:
    """Round-robin merge of already-ranked sequences, stopping after ``limit`` items."""
    rounds = zip_longest(*sequences, fillvalue=_MISSING)
    merged = (item for round_ in rounds for item in round_ if item is not _MISSING)
    return islice(merged, limit)


def _run_search(session_factory: sessionmaker, search, query: str, limit: int):
    with session_factory() as db:
        return search(db, query, limit)


def get_suggestions(
    session_factory: sessionmaker,
    query: str,
    entity: Optional[str] = None,
    limit: int = 10,
) -> list[SearchSuggestion]:
    if entity is not None:
        return _run_search(session_factory, ENTITY_SEARCHES[entity], query, limit)

    per_entity_limit = math.ceil(limit / len(ENTITY_SEARCHES))
    with ThreadPoolExecutor(max_workers=len(ENTITY_SEARCHES)) as pool:
        futures = [
            pool.submit(_run_search, session_factory, search, query, per_entity_limit)
            for search in ENTITY_SEARCHES.values()
        ]
        results = [future.result() for future in futures]

    suggestions = list(interleave(results, limit))
    logger.debug(
        "Search %r matched %s suggestions across %s entity types",
        query,
        len(suggestions),
        len(results),
    )
    return suggestions


__all__ = [
    "ENTITY_SEARCHES",
    "get_suggestions",
    "interleave",
    "search_orders",
    "search_products",
    "search_suppliers",
]
