"""Abstract interfaces (Protocol classes) for the interpretation service.

Services depend on these interfaces, not on concrete implementations, so
they can be tested with in-memory or mocked repositories. The SQLAlchemy
implementation lives in ``adapters/grid_repository.py``.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from maturity_interpretation.core.models.grid import GridRow


@runtime_checkable
class IInterpretationGridRepository(Protocol):
    """Repository interface for the persisted interpretation grid."""

    async def find_global_level(self, function_id: str, score: float) -> GridRow | None:
        """Return the lowest global band containing score for a function."""
        ...

    async def find_thematic_level(
        self, function_id: str, theme_name: str, score: float
    ) -> GridRow | None:
        """Return the lowest thematic band containing score for a theme."""
        ...

    async def list_entries(self, function_id: str | None = None) -> list[GridRow]:
        """List grid rows, optionally restricted to one function."""
        ...

    async def replace_all(self, rows: Sequence[GridRow]) -> int:
        """Replace the whole grid with rows and return the number written."""
        ...
