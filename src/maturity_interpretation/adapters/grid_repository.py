"""Repository for the persisted interpretation grid.

Classifies stored scores with ``score BETWEEN score_min AND score_max``,
the same inclusive semantics as ``ScoreRange.contains``. When adjacent bands
share a boundary the lowest band wins (``ORDER BY score_min LIMIT 1``),
matching the catalog's first-match-wins declaration order.
"""

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from maturity_interpretation.core.models.grid import GridRow, InterpretationGridEntry
from maturity_interpretation.observability import get_logger

logger = get_logger(__name__)


class InterpretationGridRepository:
    """SQLAlchemy repository for InterpretationGridEntry rows."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_global_level(self, function_id: str, score: float) -> GridRow | None:
        """Return the global band containing score for a function.

        Args:
            function_id: Canonical function id.
            score: Aggregate function score.

        Returns:
            Matching GridRow, or None when no band contains the score.
        """
        result = await self._session.execute(
            select(InterpretationGridEntry)
            .where(
                InterpretationGridEntry.fonction == function_id,
                InterpretationGridEntry.thematique.is_(None),
                InterpretationGridEntry.score_min <= score,
                InterpretationGridEntry.score_max >= score,
            )
            .order_by(InterpretationGridEntry.score_min)
            .limit(1)
        )
        entry = result.scalars().first()
        return entry.to_row() if entry is not None else None

    async def find_thematic_level(
        self,
        function_id: str,
        theme_name: str,
        score: float,
    ) -> GridRow | None:
        """Return the thematic band containing score for a theme.

        Args:
            function_id: Canonical function id.
            theme_name: Theme name as stored in the thematique column.
            score: Theme score.

        Returns:
            Matching GridRow, or None when no band contains the score.
        """
        result = await self._session.execute(
            select(InterpretationGridEntry)
            .where(
                InterpretationGridEntry.fonction == function_id,
                InterpretationGridEntry.thematique == theme_name,
                InterpretationGridEntry.score_min <= score,
                InterpretationGridEntry.score_max >= score,
            )
            .order_by(InterpretationGridEntry.score_min)
            .limit(1)
        )
        entry = result.scalars().first()
        return entry.to_row() if entry is not None else None

    async def list_entries(self, function_id: str | None = None) -> list[GridRow]:
        """List grid rows ordered by function, theme and lower bound.

        Args:
            function_id: Optional function filter.

        Returns:
            List of GridRow values.
        """
        query = select(InterpretationGridEntry).order_by(
            InterpretationGridEntry.fonction,
            InterpretationGridEntry.thematique,
            InterpretationGridEntry.score_min,
        )
        if function_id is not None:
            query = query.where(InterpretationGridEntry.fonction == function_id)
        result = await self._session.execute(query)
        return [entry.to_row() for entry in result.scalars().all()]

    async def replace_all(self, rows: Sequence[GridRow]) -> int:
        """Delete every grid row and insert rows in its place.

        Runs inside the caller's transaction; commit is handled by the
        session dependency.

        Args:
            rows: Complete set of rows the grid should hold.

        Returns:
            Number of rows written.
        """
        await self._session.execute(delete(InterpretationGridEntry))
        self._session.add_all([row.to_entry() for row in rows])
        await self._session.flush()

        logger.info("Interpretation grid replaced", row_count=len(rows))
        return len(rows)
