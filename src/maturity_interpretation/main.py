"""Maturity interpretation service entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from maturity_interpretation.adapters.grid_repository import InterpretationGridRepository
from maturity_interpretation.api.router import router
from maturity_interpretation.core.analysis import MaturityAnalyzer
from maturity_interpretation.core.catalog import get_catalog
from maturity_interpretation.core.resolver import LevelResolver
from maturity_interpretation.core.services import InterpretationService
from maturity_interpretation.database import dispose_database, init_database
from maturity_interpretation.observability import configure_logging, get_logger
from maturity_interpretation.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level, json_output=settings.log_json)

logger = get_logger(__name__)


async def _sync_grid_on_startup() -> None:
    session_factory = init_database(settings)
    async with session_factory() as session:
        service = InterpretationService(
            resolver=LevelResolver(get_catalog(), locale=settings.fallback_locale),
            analyzer=MaturityAnalyzer(),
            grid_repository=InterpretationGridRepository(session),
        )
        await service.sync_grid()
        await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    # Startup
    catalog = get_catalog()
    logger.info(
        "Maturity catalog loaded",
        function_count=len(catalog.functions),
        theme_count=len(catalog.themes),
        thematic_level_count=len(catalog.thematic_levels),
    )
    if settings.grid_sync_on_startup:
        await _sync_grid_on_startup()
    else:
        init_database(settings)
    yield
    # Shutdown
    await dispose_database()


app: FastAPI = FastAPI(
    title=settings.service_name,
    version=settings.version,
    lifespan=lifespan,
)


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok", "service": settings.service_name}


app.include_router(router, prefix="/api/v1")
