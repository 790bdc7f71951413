"""Service layer for the maturity interpretation API.

Wraps the pure engine (catalog, resolver, analyzer) for the HTTP routes and
owns the interpretation grid lifecycle:
    1. list_functions() / get_function()  — catalog browsing
    2. get_global_level()                 — global interpretation or error
    3. get_thematic_level()               — thematic interpretation, never fails
    4. analyze()                          — full analysis report
    5. sync_grid() / detect_grid_drift()  — grille_interpretation maintenance
    6. lookup_grid_level()                — interpretation read from grille_interpretation

The engine itself returns None instead of raising; this layer turns those
None results into domain exceptions the routes map to HTTP 404. No
SQLAlchemy or FastAPI imports belong here.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from maturity_interpretation.adapters.grid_seeder import catalog_to_grid_rows
from maturity_interpretation.core.analysis import (
    AnalysisReport,
    FunctionScoreInput,
    MaturityAnalyzer,
)
from maturity_interpretation.core.catalog import MaturityCatalog
from maturity_interpretation.core.interfaces import IInterpretationGridRepository
from maturity_interpretation.core.models.catalog import (
    GenericLevel,
    GlobalLevel,
    MaturityFunction,
    ThematicLevel,
)
from maturity_interpretation.core.models.grid import GridRow
from maturity_interpretation.core.resolver import LevelResolver
from maturity_interpretation.observability import get_logger

logger = get_logger(__name__)


class FunctionNotFoundError(Exception):
    """Raised when a function reference matches no catalogued function."""


class LevelNotFoundError(Exception):
    """Raised when no level covers the requested score."""


class GridRepositoryNotConfiguredError(Exception):
    """Raised when a grid operation runs without a grid repository."""


@dataclass(frozen=True)
class GridDrift:
    """Differences between the persisted grid and the catalog.

    Attributes:
        missing: Catalog row ids absent from the table.
        extra: Table row ids the catalog does not produce.
        changed: Row ids present in both with differing values.
    """

    missing: tuple[str, ...]
    extra: tuple[str, ...]
    changed: tuple[str, ...]

    @property
    def in_sync(self) -> bool:
        return not (self.missing or self.extra or self.changed)


class InterpretationService:
    """Orchestrates catalog lookups, level resolution and grid maintenance.

    Depends on an optional grid repository injected at construction time;
    every non-grid operation works without one.
    """

    def __init__(
        self,
        resolver: LevelResolver,
        analyzer: MaturityAnalyzer,
        grid_repository: IInterpretationGridRepository | None = None,
    ) -> None:
        """Initialise with engine components and an optional grid repository.

        Args:
            resolver: Level resolver over the catalog.
            analyzer: Analyzer used for analysis reports.
            grid_repository: Persistence for grille_interpretation.
        """
        self._resolver = resolver
        self._analyzer = analyzer
        self._grid_repository = grid_repository

    @property
    def catalog(self) -> MaturityCatalog:
        return self._resolver.catalog

    # ------------------------------------------------------------------
    # Catalog and level resolution
    # ------------------------------------------------------------------

    def list_functions(self) -> tuple[MaturityFunction, ...]:
        """Return every catalogued function in display order."""
        return self.catalog.functions

    def get_function(self, function_ref: str) -> MaturityFunction:
        """Resolve a function reference.

        Args:
            function_ref: Id, display name or alias.

        Returns:
            The resolved MaturityFunction.

        Raises:
            FunctionNotFoundError: If the reference matches no function.
        """
        function = self.catalog.resolve_function(function_ref)
        if function is None:
            raise FunctionNotFoundError(f"Unknown maturity function: {function_ref!r}")
        return function

    def get_global_level(self, function_ref: str, score: float) -> GlobalLevel:
        """Return the global level for a function score.

        Raises:
            FunctionNotFoundError: If the reference matches no function.
            LevelNotFoundError: If no global level covers the score.
        """
        function = self.get_function(function_ref)
        level = self._resolver.resolve_global_level(function, score)
        if level is None:
            raise LevelNotFoundError(
                f"No global level of {function.id!r} covers score {score}"
            )
        return level

    def get_thematic_level(
        self,
        function_ref: str,
        theme_name: str,
        score: float,
    ) -> ThematicLevel | GenericLevel:
        """Return the thematic level for a theme score, falling back to a generic tier."""
        return self._resolver.resolve_thematic_level(function_ref, theme_name, score)

    def analyze(self, inputs: Iterable[FunctionScoreInput]) -> AnalysisReport:
        """Build an analysis report for caller-supplied scores."""
        return self._analyzer.analyze(inputs)

    # ------------------------------------------------------------------
    # Interpretation grid
    # ------------------------------------------------------------------

    def _require_grid_repository(self) -> IInterpretationGridRepository:
        if self._grid_repository is None:
            raise GridRepositoryNotConfiguredError(
                "Interpretation grid operations need a grid repository"
            )
        return self._grid_repository

    async def sync_grid(self) -> int:
        """Regenerate grille_interpretation from the catalog.

        Returns:
            Number of rows written.

        Raises:
            GridRepositoryNotConfiguredError: If no grid repository was injected.
        """
        repository = self._require_grid_repository()
        rows = catalog_to_grid_rows(self.catalog)
        written = await repository.replace_all(rows)
        logger.info("Grid synchronised", row_count=written)
        return written

    async def detect_grid_drift(self) -> GridDrift:
        """Compare grille_interpretation with the rows the catalog produces.

        Returns:
            GridDrift listing missing, extra and changed row ids, each sorted.

        Raises:
            GridRepositoryNotConfiguredError: If no grid repository was injected.
        """
        repository = self._require_grid_repository()
        expected = {row.id_grille: row for row in catalog_to_grid_rows(self.catalog)}
        persisted = {row.id_grille: row for row in await repository.list_entries()}

        drift = GridDrift(
            missing=tuple(sorted(expected.keys() - persisted.keys())),
            extra=tuple(sorted(persisted.keys() - expected.keys())),
            changed=tuple(
                sorted(
                    row_id
                    for row_id in expected.keys() & persisted.keys()
                    if expected[row_id] != persisted[row_id]
                )
            ),
        )
        if not drift.in_sync:
            logger.warning(
                "Interpretation grid drift detected",
                missing_count=len(drift.missing),
                extra_count=len(drift.extra),
                changed_count=len(drift.changed),
            )
        return drift

    async def lookup_grid_level(
        self,
        function_ref: str,
        score: float,
        theme_name: str | None = None,
    ) -> GridRow:
        """Interpret a score from the persisted grille_interpretation rows.

        Reads the table rather than the in-memory catalog, so it reflects
        whatever the last grid sync (or manual edit) stored.

        Args:
            function_ref: Id, display name or alias.
            score: Function score, or theme score when theme_name is given.
            theme_name: Theme to interpret. None selects the global bands.

        Returns:
            The lowest stored band containing the score.

        Raises:
            GridRepositoryNotConfiguredError: If no grid repository was injected.
            FunctionNotFoundError: If the reference matches no function.
            LevelNotFoundError: If no stored row covers the score.
        """
        repository = self._require_grid_repository()
        function = self.get_function(function_ref)
        if theme_name is None:
            row = await repository.find_global_level(function.id, score)
        else:
            row = await repository.find_thematic_level(function.id, theme_name, score)
        if row is None:
            raise LevelNotFoundError(
                f"No grid row of {function.id!r} (theme {theme_name!r}) covers score {score}"
            )
        return row
