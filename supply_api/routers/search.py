from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import sessionmaker

from supply_api.core.constants import SEARCH_ENTITIES
from supply_api.core.validation import (
    parse_int,
    require_at_least,
    require_at_most,
    require_choice,
    require_min_length,
    require_value,
)
from supply_api.dependencies import get_session_factory
from supply_api.schemas.search import SearchResponse
from supply_api.services.search_service import get_suggestions

router = APIRouter(prefix="/search", tags=["Search"])


@router.get("/suggestions", response_model=SearchResponse, response_model_exclude_none=True)
def search_suggestions(
    request: Request,
    q=Query(None, description="Search query (minimum 3 characters)"),
    entity=Query(None, description="products | suppliers | orders (default: all)"),
    limit=Query(None, description="Maximum number of results (1-20, default 10)"),
    session_factory: sessionmaker = Depends(get_session_factory),
):
    settings = request.app.state.settings

    query = require_value(q, 'Query parameter "q" is required')
    require_min_length(
        query,
        settings.SEARCH_MIN_QUERY_LENGTH,
        "Query must be at least {} characters long".format(settings.SEARCH_MIN_QUERY_LENGTH),
    )

    if entity is not None and not str(entity).strip():
        entity = None
    if entity is not None:
        require_choice(
            entity,
            SEARCH_ENTITIES,
            "Invalid entity type. Must be one of: {}".format(", ".join(SEARCH_ENTITIES)),
        )

    if limit is None or not str(limit).strip():
        limit = settings.SEARCH_DEFAULT_LIMIT
    else:
        limit = parse_int(limit, "Limit must be a positive number")
        require_at_least(limit, 1, "Limit must be a positive number")
        require_at_most(
            limit,
            settings.SEARCH_MAX_LIMIT,
            "Limit cannot exceed {}".format(settings.SEARCH_MAX_LIMIT),
        )

    suggestions = get_suggestions(session_factory, query, entity, limit)
    return SearchResponse(query=query, suggestions=suggestions)


__all__ = ["router"]
