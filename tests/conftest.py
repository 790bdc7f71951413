"""Test fixtures for maturity-interpretation.

Provides the catalog, engine components, a mocked grid repository and an
async HTTP client with the database-backed dependencies overridden.
"""

from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from maturity_interpretation.api.router import get_grid_repository
from maturity_interpretation.core.analysis import MaturityAnalyzer
from maturity_interpretation.core.catalog import MaturityCatalog, get_catalog
from maturity_interpretation.core.interfaces import IInterpretationGridRepository
from maturity_interpretation.core.resolver import LevelResolver
from maturity_interpretation.core.services import InterpretationService
from maturity_interpretation.main import app
from maturity_interpretation.settings import get_settings


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def catalog() -> MaturityCatalog:
    """The process-wide catalog singleton."""
    return get_catalog()


@pytest.fixture()
def resolver(catalog: MaturityCatalog) -> LevelResolver:
    """Resolver with English fallback texts."""
    return LevelResolver(catalog, locale="en")


@pytest.fixture()
def analyzer(resolver: LevelResolver) -> MaturityAnalyzer:
    return MaturityAnalyzer(resolver=resolver)


@pytest.fixture()
def french_fallback_locale(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Configure MATURITY_FALLBACK_LOCALE=fr for the duration of a test."""
    monkeypatch.setenv("MATURITY_FALLBACK_LOCALE", "fr")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def mock_grid_repository() -> AsyncMock:
    """Mock grid repository with an empty table."""
    repository = AsyncMock(spec=IInterpretationGridRepository)
    repository.list_entries.return_value = []
    repository.replace_all.side_effect = lambda rows: len(rows)
    return repository


@pytest.fixture()
def service(
    resolver: LevelResolver,
    analyzer: MaturityAnalyzer,
    mock_grid_repository: AsyncMock,
) -> InterpretationService:
    return InterpretationService(
        resolver=resolver,
        analyzer=analyzer,
        grid_repository=mock_grid_repository,
    )


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def client(mock_grid_repository: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with the grid repository overridden."""
    app.dependency_overrides[get_grid_repository] = lambda: mock_grid_repository

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
