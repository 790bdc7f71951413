"""Analysis report aggregation.

Turns caller-computed function and theme scores into a full interpretation
report: a global level per function, a thematic level per theme, the
improvement potential of each score, and report-level strengths and
weaknesses. Score aggregation (averaging answers into theme and function
scores) stays with the caller.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from maturity_interpretation.core.fallback import generic_global_level
from maturity_interpretation.core.models.catalog import ThematicLevel
from maturity_interpretation.core.resolver import FunctionRef, LevelResolver
from maturity_interpretation.observability import get_logger

logger = get_logger(__name__)

DEFAULT_SCORE_MAX: float = 5.0
DEFAULT_STRENGTH_THRESHOLD: float = 3.5
DEFAULT_WEAKNESS_THRESHOLD: float = 2.5

# Remaining points above which improvement is high / medium priority.
HIGH_PRIORITY_GAP: float = 2.0
MEDIUM_PRIORITY_GAP: float = 1.0


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ThemeScoreInput:
    """Score of one theme as computed by the caller."""

    theme_name: str
    score: float


@dataclass(frozen=True)
class FunctionScoreInput:
    """Scores of one function as computed by the caller.

    Attributes:
        function_ref: Function id, display name or alias.
        score: Aggregate function score.
        themes: Per-theme scores.
    """

    function_ref: str
    score: float
    themes: tuple[ThemeScoreInput, ...] = field(default=())


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class ImprovementPriority(str, Enum):
    """Urgency of closing the gap to the maximum score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ImprovementPotential:
    """Distance between a score and the top of the scale.

    Attributes:
        points_possible: Points left to gain, rounded to 2 decimals.
        percentage: Remaining gap as a whole percentage of the scale.
        priority: HIGH above 2 points, MEDIUM above 1 point, else LOW.
    """

    points_possible: float
    percentage: int
    priority: ImprovementPriority


@dataclass(frozen=True)
class ThemeInterpretation:
    theme_name: str
    score: float
    level_id: str | None
    label: str
    description: str
    recommendations: str
    is_generic: bool
    improvement: ImprovementPotential


@dataclass(frozen=True)
class FunctionInterpretation:
    """Interpretation of one function's scores.

    ``function_id`` is None and ``function_name`` echoes the caller's
    reference when the function is not catalogued; the global level is then
    a generic five-tier level and ``is_generic`` is True.
    """

    function_ref: str
    function_id: str | None
    function_name: str
    score: float
    level_id: str | None
    label: str
    description: str
    recommendations: str
    is_generic: bool
    improvement: ImprovementPotential
    themes: tuple[ThemeInterpretation, ...]


@dataclass(frozen=True)
class ScoreHighlight:
    """A function singled out as a strength or weakness."""

    function_ref: str
    function_id: str | None
    function_name: str
    score: float
    label: str
    improvement: ImprovementPotential


@dataclass(frozen=True)
class AnalysisReport:
    functions: tuple[FunctionInterpretation, ...]
    strengths: tuple[ScoreHighlight, ...]
    weaknesses: tuple[ScoreHighlight, ...]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def improvement_potential(
    score: float,
    score_max: float = DEFAULT_SCORE_MAX,
) -> ImprovementPotential:
    """Compute how much room a score leaves before the top of the scale.

    Args:
        score: Current score.
        score_max: Top of the scale.

    Returns:
        ImprovementPotential for the score. A NaN score is treated as 0.
    """
    potential = score_max if math.isnan(score) else score_max - score
    if potential > HIGH_PRIORITY_GAP:
        priority = ImprovementPriority.HIGH
    elif potential > MEDIUM_PRIORITY_GAP:
        priority = ImprovementPriority.MEDIUM
    else:
        priority = ImprovementPriority.LOW
    return ImprovementPotential(
        points_possible=round(potential, 2),
        percentage=round(potential / score_max * 100) if score_max else 0,
        priority=priority,
    )


def _highlight(interpretation: FunctionInterpretation) -> ScoreHighlight:
    return ScoreHighlight(
        function_ref=interpretation.function_ref,
        function_id=interpretation.function_id,
        function_name=interpretation.function_name,
        score=interpretation.score,
        label=interpretation.label,
        improvement=interpretation.improvement,
    )


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------


class MaturityAnalyzer:
    """Builds AnalysisReports from caller-supplied scores.

    Holds no per-request state; one instance can be shared.
    """

    def __init__(
        self,
        resolver: LevelResolver | None = None,
        score_max: float = DEFAULT_SCORE_MAX,
        strength_threshold: float = DEFAULT_STRENGTH_THRESHOLD,
        weakness_threshold: float = DEFAULT_WEAKNESS_THRESHOLD,
    ) -> None:
        """Initialise the analyzer.

        Args:
            resolver: Level resolver. Defaults to one over the catalog singleton
                using the configured fallback locale.
            score_max: Top of the scoring scale.
            strength_threshold: Minimum score counted as a strength (inclusive).
            weakness_threshold: Score below which a function is a weakness.
        """
        self._resolver = resolver if resolver is not None else LevelResolver()
        self._score_max = score_max
        self._strength_threshold = strength_threshold
        self._weakness_threshold = weakness_threshold

    def interpret_function(self, entry: FunctionScoreInput) -> FunctionInterpretation:
        """Interpret one function and all of its theme scores."""
        function = self._resolver.catalog.resolve_function(entry.function_ref)
        themes = tuple(
            self._interpret_theme(function or entry.function_ref, theme)
            for theme in entry.themes
        )

        level = (
            self._resolver.resolve_global_level(function, entry.score)
            if function is not None
            else None
        )
        if level is not None:
            level_id: str | None = level.id
            label, description, recommendations = (
                level.label,
                level.description,
                level.recommendations,
            )
        else:
            generic = generic_global_level(entry.score, self._resolver.locale)
            level_id = None
            label, description, recommendations = (
                generic.label,
                generic.description,
                generic.recommendations,
            )

        return FunctionInterpretation(
            function_ref=entry.function_ref,
            function_id=function.id if function else None,
            function_name=function.name if function else entry.function_ref,
            score=entry.score,
            level_id=level_id,
            label=label,
            description=description,
            recommendations=recommendations,
            is_generic=level is None,
            improvement=improvement_potential(entry.score, self._score_max),
            themes=themes,
        )

    def _interpret_theme(
        self,
        function_ref: FunctionRef,
        theme: ThemeScoreInput,
    ) -> ThemeInterpretation:
        level = self._resolver.resolve_thematic_level(
            function_ref, theme.theme_name, theme.score
        )
        return ThemeInterpretation(
            theme_name=theme.theme_name,
            score=theme.score,
            level_id=level.id if isinstance(level, ThematicLevel) else None,
            label=level.label,
            description=level.description,
            recommendations=level.recommendations,
            is_generic=level.is_generic,
            improvement=improvement_potential(theme.score, self._score_max),
        )

    def analyze(self, inputs: Iterable[FunctionScoreInput]) -> AnalysisReport:
        """Interpret every function and rank strengths and weaknesses.

        Args:
            inputs: Per-function scores, in the order they should be reported.

        Returns:
            AnalysisReport with strengths sorted by descending score and
            weaknesses sorted by ascending score. NaN scores are neither.
        """
        functions = tuple(self.interpret_function(entry) for entry in inputs)
        scored = [item for item in functions if not math.isnan(item.score)]

        strengths = tuple(
            _highlight(item)
            for item in sorted(scored, key=lambda item: item.score, reverse=True)
            if item.score >= self._strength_threshold
        )
        weaknesses = tuple(
            _highlight(item)
            for item in sorted(scored, key=lambda item: item.score)
            if item.score < self._weakness_threshold
        )

        logger.info(
            "Maturity analysis completed",
            function_count=len(functions),
            generic_function_count=sum(1 for item in functions if item.is_generic),
            strength_count=len(strengths),
            weakness_count=len(weaknesses),
        )
        return AnalysisReport(
            functions=functions,
            strengths=strengths,
            weaknesses=weaknesses,
        )
