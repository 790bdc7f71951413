"""FastAPI router for the maturity interpretation API.

All routes are thin: they validate inputs, build the service, delegate to
it, and serialise responses. Domain exceptions are mapped to HTTP errors
here. No business logic lives in this module.

API prefix: /api/v1/interpretation
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from maturity_interpretation.adapters.grid_repository import InterpretationGridRepository
from maturity_interpretation.api.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    FunctionDetailResponse,
    FunctionListResponse,
    FunctionSummarySchema,
    GlobalLevelResponse,
    GlobalLevelSchema,
    GridDriftResponse,
    GridRowSchema,
    GridSyncResponse,
    ThematicLevelResponse,
)
from maturity_interpretation.core.analysis import MaturityAnalyzer
from maturity_interpretation.core.catalog import get_catalog
from maturity_interpretation.core.interfaces import IInterpretationGridRepository
from maturity_interpretation.core.models.catalog import GenericLevel
from maturity_interpretation.core.resolver import LevelResolver
from maturity_interpretation.core.services import (
    FunctionNotFoundError,
    InterpretationService,
    LevelNotFoundError,
)
from maturity_interpretation.database import get_db_session
from maturity_interpretation.settings import Settings, get_settings

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/interpretation", tags=["Maturity Interpretation"])


# ---------------------------------------------------------------------------
# Dependency factories
# ---------------------------------------------------------------------------


def get_level_resolver(settings: Settings = Depends(get_settings)) -> LevelResolver:
    """Build a LevelResolver over the catalog singleton with the configured locale."""
    return LevelResolver(get_catalog(), locale=settings.fallback_locale)


def get_analyzer(
    resolver: LevelResolver = Depends(get_level_resolver),
    settings: Settings = Depends(get_settings),
) -> MaturityAnalyzer:
    """Build a MaturityAnalyzer using the configured scale and thresholds."""
    return MaturityAnalyzer(
        resolver=resolver,
        score_max=settings.score_max,
        strength_threshold=settings.strength_threshold,
        weakness_threshold=settings.weakness_threshold,
    )


def get_interpretation_service(
    resolver: LevelResolver = Depends(get_level_resolver),
    analyzer: MaturityAnalyzer = Depends(get_analyzer),
) -> InterpretationService:
    """Build an InterpretationService without persistence.

    Args:
        resolver: Level resolver.
        analyzer: Analysis report builder.

    Returns:
        InterpretationService for catalog and resolution endpoints.
    """
    return InterpretationService(resolver=resolver, analyzer=analyzer)


def get_grid_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IInterpretationGridRepository:
    """Build the grid repository on the request's database session."""
    return InterpretationGridRepository(session)


def get_grid_service(
    resolver: LevelResolver = Depends(get_level_resolver),
    analyzer: MaturityAnalyzer = Depends(get_analyzer),
    grid_repository: IInterpretationGridRepository = Depends(get_grid_repository),
) -> InterpretationService:
    """Build an InterpretationService with grid persistence.

    Args:
        resolver: Level resolver.
        analyzer: Analysis report builder.
        grid_repository: Repository for grille_interpretation.

    Returns:
        InterpretationService for grid maintenance endpoints.
    """
    return InterpretationService(
        resolver=resolver,
        analyzer=analyzer,
        grid_repository=grid_repository,
    )


# ---------------------------------------------------------------------------
# Catalog endpoints
# ---------------------------------------------------------------------------


@router.get(
    "/functions",
    response_model=FunctionListResponse,
    summary="List maturity functions",
)
async def list_functions(
    service: InterpretationService = Depends(get_interpretation_service),
) -> FunctionListResponse:
    """Return every catalogued function ordered by display order."""
    functions = service.list_functions()
    return FunctionListResponse(
        functions=[
            FunctionSummarySchema(
                id=function.id,
                name=function.name,
                description=function.description,
                display_order=function.display_order,
                theme_count=len(function.themes),
            )
            for function in functions
        ],
        total=len(functions),
    )


@router.get(
    "/functions/{function_ref}",
    response_model=FunctionDetailResponse,
    summary="Get one maturity function with its themes and global levels",
)
async def get_function(
    function_ref: str = Path(..., description="Function id, display name or alias"),
    service: InterpretationService = Depends(get_interpretation_service),
) -> FunctionDetailResponse:
    """Resolve a function reference and return its catalog entry."""
    try:
        function = service.get_function(function_ref)
    except FunctionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return FunctionDetailResponse.model_validate(function)


# ---------------------------------------------------------------------------
# Level resolution endpoints
# ---------------------------------------------------------------------------


@router.get(
    "/functions/{function_ref}/global-level",
    response_model=GlobalLevelResponse,
    summary="Interpret a function's aggregate score",
)
async def get_global_level(
    function_ref: str = Path(..., description="Function id, display name or alias"),
    score: float = Query(..., allow_inf_nan=False, description="Aggregate score"),
    service: InterpretationService = Depends(get_interpretation_service),
) -> GlobalLevelResponse:
    """Return the global level whose inclusive range contains the score.

    Scores outside every band (below 0 or above 5) yield 404, as do
    unknown functions.
    """
    try:
        level = service.get_global_level(function_ref, score)
    except (FunctionNotFoundError, LevelNotFoundError) as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return GlobalLevelResponse(
        function_id=level.function_id,
        score=score,
        level=GlobalLevelSchema.model_validate(level),
    )


@router.get(
    "/functions/{function_ref}/thematic-level",
    response_model=ThematicLevelResponse,
    summary="Interpret a theme score",
)
async def get_thematic_level(
    function_ref: str = Path(..., description="Function id, display name or alias"),
    theme: str = Query(..., min_length=1, description="Theme name"),
    score: float = Query(..., allow_inf_nan=False, description="Theme score"),
    service: InterpretationService = Depends(get_interpretation_service),
) -> ThematicLevelResponse:
    """Return the thematic level for a theme score.

    Always succeeds: uncatalogued functions and themes get a generic
    three-tier level flagged with ``is_generic``.
    """
    level = service.get_thematic_level(function_ref, theme, score)
    function = service.catalog.resolve_function(function_ref)
    if isinstance(level, GenericLevel):
        return ThematicLevelResponse(
            function_id=function.id if function else None,
            theme_name=theme,
            score=score,
            level_id=None,
            label=level.label,
            description=level.description,
            recommendations=level.recommendations,
            is_generic=True,
            tier=level.tier.value,
        )
    return ThematicLevelResponse(
        function_id=level.function_id,
        theme_name=theme,
        score=score,
        level_id=level.id,
        label=level.label,
        description=level.description,
        recommendations=level.recommendations,
        is_generic=False,
    )


# ---------------------------------------------------------------------------
# Analysis endpoint
# ---------------------------------------------------------------------------


@router.post(
    "/analyses",
    response_model=AnalysisResponse,
    status_code=status.HTTP_200_OK,
    summary="Interpret a full set of function and theme scores",
)
async def create_analysis(
    body: AnalysisRequest,
    service: InterpretationService = Depends(get_interpretation_service),
) -> AnalysisResponse:
    """Build an analysis report from caller-computed scores.

    Score aggregation is the caller's responsibility; this endpoint only
    interprets the scores it receives.
    """
    report = service.analyze(entry.to_input() for entry in body.functions)
    return AnalysisResponse.model_validate(report)


# ---------------------------------------------------------------------------
# Interpretation grid endpoints
# ---------------------------------------------------------------------------


@router.post(
    "/grid/sync",
    response_model=GridSyncResponse,
    summary="Regenerate grille_interpretation from the catalog",
)
async def sync_grid(
    service: InterpretationService = Depends(get_grid_service),
) -> GridSyncResponse:
    """Replace every grid row with the rows generated from the catalog."""
    row_count = await service.sync_grid()
    logger.info("Grid sync requested", row_count=row_count)
    return GridSyncResponse(row_count=row_count)


@router.get(
    "/grid/drift",
    response_model=GridDriftResponse,
    summary="Compare grille_interpretation with the catalog",
)
async def get_grid_drift(
    service: InterpretationService = Depends(get_grid_service),
) -> GridDriftResponse:
    """Report grid rows missing from, extra to, or differing from the catalog."""
    drift = await service.detect_grid_drift()
    return GridDriftResponse.model_validate(drift)


@router.get(
    "/grid/level",
    response_model=GridRowSchema,
    summary="Interpret a score from the persisted grille_interpretation",
)
async def get_grid_level(
    function: str = Query(..., min_length=1, description="Function id, display name or alias"),
    score: float = Query(..., allow_inf_nan=False, description="Function or theme score"),
    theme: str | None = Query(None, min_length=1, description="Theme name; omit for global"),
    service: InterpretationService = Depends(get_grid_service),
) -> GridRowSchema:
    """Return the stored band covering the score.

    Unknown functions and scores no stored row covers yield 404. Unlike the
    thematic-level endpoint there is no generic fallback here: the table
    only holds catalogued rows.
    """
    try:
        row = await service.lookup_grid_level(function, score, theme_name=theme)
    except (FunctionNotFoundError, LevelNotFoundError) as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return GridRowSchema.model_validate(row)
