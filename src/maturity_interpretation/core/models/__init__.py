"""Domain entities and ORM models for the maturity interpretation service."""

from maturity_interpretation.core.models.catalog import (
    ADVANCED_THRESHOLD,
    INTERMEDIATE_THRESHOLD,
    FallbackTier,
    GenericGlobalLevel,
    GenericLevel,
    GlobalLevel,
    MaturityFunction,
    ScoreRange,
    Theme,
    ThematicLevel,
    first_in_range,
)
from maturity_interpretation.core.models.grid import (
    GridBase,
    GridRow,
    InterpretationGridEntry,
)

__all__ = [
    "ADVANCED_THRESHOLD",
    "INTERMEDIATE_THRESHOLD",
    "FallbackTier",
    "GenericGlobalLevel",
    "GenericLevel",
    "GlobalLevel",
    "GridBase",
    "GridRow",
    "InterpretationGridEntry",
    "MaturityFunction",
    "ScoreRange",
    "Theme",
    "ThematicLevel",
    "first_in_range",
]
