"""Immutable catalog entities for the maturity interpretation engine.

Every entity is a frozen dataclass and every collection is a tuple, so a
built catalog can be shared across concurrent requests without locking.

Entities:
    ScoreRange       — inclusive score band shared by every level type
    Theme            — scored sub-dimension of a function
    GlobalLevel      — qualitative tier for a function's aggregate score
    ThematicLevel    — qualitative tier for one theme, keyed by theme name
    MaturityFunction — top-level maturity domain owning themes and levels
    GenericLevel     — synthesised tier when no thematic level is catalogued
    GenericGlobalLevel — synthesised five-tier level for an unknown function
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeVar

# Tier boundaries shared by the curated thematic tables and the fallback.
INTERMEDIATE_THRESHOLD: float = 1.5
ADVANCED_THRESHOLD: float = 3.5


@dataclass(frozen=True)
class ScoreRange:
    """Closed score band ``[score_min, score_max]``.

    Both ends are inclusive, which mirrors SQL ``BETWEEN``. Adjacent bands
    share their boundary value; callers resolve the overlap by taking the
    first matching band in declaration order.

    Attributes:
        score_min: Lower bound (inclusive).
        score_max: Upper bound (inclusive).
    """

    score_min: float
    score_max: float

    def contains(self, score: float) -> bool:
        """Return True when score lies within the band. NaN never matches."""
        return self.score_min <= score <= self.score_max


class _Ranged(Protocol):
    score_range: ScoreRange


_RangedT = TypeVar("_RangedT", bound=_Ranged)


def first_in_range(levels: Iterable[_RangedT], score: float) -> _RangedT | None:
    """Return the first level whose range contains score, or None."""
    for level in levels:
        if level.score_range.contains(score):
            return level
    return None


@dataclass(frozen=True)
class Theme:
    """A sub-dimension of a function, scored independently.

    Attributes:
        id: Stable theme identifier (e.g. 'devsecops_culture').
        function_id: Id of the owning function (back-reference).
        name: Human-readable name, also the key for thematic levels.
        description: What the theme evaluates.
        question_count: Number of questionnaire items in the theme.
    """

    id: str
    function_id: str
    name: str
    description: str
    question_count: int


@dataclass(frozen=True)
class GlobalLevel:
    """Maturity tier for a function's aggregate score.

    Attributes:
        id: Level identifier (e.g. 'devsecops_n4').
        function_id: Owning function id.
        score_range: Band of aggregate scores mapped to this level.
        label: Display label (e.g. 'Niveau 4 - Géré').
        description: Narrative description of the tier.
        recommendations: Recommendation text for organisations at this tier.
    """

    id: str
    function_id: str
    score_range: ScoreRange
    label: str
    description: str
    recommendations: str


@dataclass(frozen=True)
class ThematicLevel:
    """Maturity tier for one theme of a function.

    Keyed by ``(function_id, theme_name)`` rather than by theme id, so
    lookups go through the normalizer when the name drifts.
    """

    id: str
    function_id: str
    theme_name: str
    score_range: ScoreRange
    label: str
    description: str
    recommendations: str

    @property
    def is_generic(self) -> bool:
        return False


@dataclass(frozen=True)
class MaturityFunction:
    """Top-level maturity domain.

    Attributes:
        id: Canonical identifier, unique across the catalog.
        name: Display name.
        description: What the function evaluates.
        display_order: Ordering key for presentation.
        themes: Themes owned by this function.
        global_levels: Global levels in declaration (ascending) order.
    """

    id: str
    name: str
    description: str
    display_order: int
    themes: tuple[Theme, ...] = field(default=())
    global_levels: tuple[GlobalLevel, ...] = field(default=())

    @property
    def theme_names(self) -> tuple[str, ...]:
        return tuple(theme.name for theme in self.themes)


class FallbackTier(str, Enum):
    """Three-way classification used by the fallback generator."""

    LOW = "low"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class GenericLevel:
    """Synthesised interpretation when no catalogued level matches.

    Attributes:
        theme_name: Name the level was generated for.
        tier: Fallback tier the score fell into.
        label: ``"{theme_name} - {tier label}"``.
        description: Generic narrative for the tier.
        recommendations: Generic recommendation for the tier.
    """

    theme_name: str
    tier: FallbackTier
    label: str
    description: str
    recommendations: str

    @property
    def is_generic(self) -> bool:
        return True


@dataclass(frozen=True)
class GenericGlobalLevel:
    """Synthesised five-tier interpretation for an uncatalogued function.

    Attributes:
        rank: Tier number, 1 (initial) to 5 (optimised).
        label: Display label (e.g. 'Niveau 4 - Géré' or 'Level 4 - Managed').
        description: Generic narrative for the tier.
        recommendations: Generic recommendation for the tier.
    """

    rank: int
    label: str
    description: str
    recommendations: str

    @property
    def is_generic(self) -> bool:
        return True
