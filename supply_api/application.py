import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from supply_api.config import Settings, get_settings
from supply_api.core.errors import register_exception_handlers
from supply_api.core.logging import setup_logging
from supply_api.database import Base, create_db_engine, create_session_factory, ensure_search_indexes
from supply_api.database.seed import seed_demo_data
from supply_api.models import import_all_models
from supply_api.routers import API_ROUTERS, health_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    engine = create_db_engine(settings.DATABASE_URL)
    session_factory = create_session_factory(engine)

    import_all_models()
    Base.metadata.create_all(bind=engine)
    ensure_search_indexes(engine)

    if settings.SEED_DEMO_DATA:
        with session_factory() as db:
            seed_demo_data(db)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    register_exception_handlers(app)

    app.include_router(health_router)
    for router in API_ROUTERS:
        app.include_router(router, prefix=settings.API_PREFIX)

    logger.info("%s ready (environment=%s)", settings.APP_NAME, settings.ENVIRONMENT)
    return app


__all__ = ["create_app"]
