"""Pydantic request/response schemas for the maturity interpretation API.

All API inputs and outputs are typed Pydantic v2 models. Engine results are
frozen dataclasses; response models read them with ``from_attributes``.
"""

from pydantic import BaseModel, ConfigDict, Field

from maturity_interpretation.core.analysis import (
    FunctionScoreInput,
    ImprovementPriority,
    ThemeScoreInput,
)


class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class ScoreRangeSchema(_FromEngine):
    """Inclusive score band.

    Attributes:
        score_min: Lower bound (inclusive).
        score_max: Upper bound (inclusive).
    """

    score_min: float
    score_max: float


class ThemeSchema(_FromEngine):
    """A theme of a maturity function."""

    id: str
    name: str
    description: str
    question_count: int


class GlobalLevelSchema(_FromEngine):
    """A catalogued global maturity level.

    Attributes:
        id: Level identifier (e.g. 'devsecops_n4').
        function_id: Owning function id.
        score_range: Band of scores mapped to this level.
        label: Display label (e.g. 'Niveau 4 - Géré').
        description: Narrative description of the level.
        recommendations: Recommendation text.
    """

    id: str
    function_id: str
    score_range: ScoreRangeSchema
    label: str
    description: str
    recommendations: str


class FunctionSummarySchema(BaseModel):
    """Catalog entry for one function, without its levels."""

    id: str
    name: str
    description: str
    display_order: int
    theme_count: int


class FunctionListResponse(BaseModel):
    """All catalogued functions in display order."""

    functions: list[FunctionSummarySchema]
    total: int


class FunctionDetailResponse(_FromEngine):
    """Full catalog entry for one function.

    Attributes:
        id: Canonical function id.
        name: Display name.
        description: What the function evaluates.
        display_order: Ordering key.
        themes: Themes of the function.
        global_levels: Global levels, lowest band first.
    """

    id: str
    name: str
    description: str
    display_order: int
    themes: list[ThemeSchema]
    global_levels: list[GlobalLevelSchema]


# ---------------------------------------------------------------------------
# Level resolution
# ---------------------------------------------------------------------------


class GlobalLevelResponse(BaseModel):
    """Global interpretation of a function score."""

    function_id: str
    score: float
    level: GlobalLevelSchema


class ThematicLevelResponse(BaseModel):
    """Thematic interpretation of a theme score.

    Attributes:
        function_id: Resolved function id, None when the function is unknown.
        theme_name: Theme name as requested.
        score: Requested score.
        level_id: Catalogued level id, None for generic levels.
        label: Level label.
        description: Level description.
        recommendations: Recommendation text.
        is_generic: True when the fallback generator produced the level.
        tier: Fallback tier ('low', 'intermediate', 'advanced') for generic levels.
    """

    function_id: str | None
    theme_name: str
    score: float
    level_id: str | None
    label: str
    description: str
    recommendations: str
    is_generic: bool
    tier: str | None = None


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


class ThemeScoreRequest(BaseModel):
    """Caller-computed score of one theme."""

    theme: str = Field(..., min_length=1, max_length=200)
    score: float = Field(..., allow_inf_nan=False)

    def to_input(self) -> ThemeScoreInput:
        return ThemeScoreInput(theme_name=self.theme, score=self.score)


class FunctionScoreRequest(BaseModel):
    """Caller-computed scores of one function.

    Attributes:
        function: Function id, display name or alias.
        score: Aggregate function score.
        themes: Per-theme scores.
    """

    function: str = Field(..., min_length=1, max_length=200)
    score: float = Field(..., allow_inf_nan=False)
    themes: list[ThemeScoreRequest] = Field(default_factory=list)

    def to_input(self) -> FunctionScoreInput:
        return FunctionScoreInput(
            function_ref=self.function,
            score=self.score,
            themes=tuple(theme.to_input() for theme in self.themes),
        )


class AnalysisRequest(BaseModel):
    """Request body for POST /analyses."""

    functions: list[FunctionScoreRequest] = Field(..., min_length=1)


class ImprovementPotentialSchema(_FromEngine):
    points_possible: float
    percentage: int
    priority: ImprovementPriority


class ThemeInterpretationSchema(_FromEngine):
    theme_name: str
    score: float
    level_id: str | None
    label: str
    description: str
    recommendations: str
    is_generic: bool
    improvement: ImprovementPotentialSchema


class FunctionInterpretationSchema(_FromEngine):
    """Interpretation of one function and its themes."""

    function_ref: str
    function_id: str | None
    function_name: str
    score: float
    level_id: str | None
    label: str
    description: str
    recommendations: str
    is_generic: bool
    improvement: ImprovementPotentialSchema
    themes: list[ThemeInterpretationSchema]


class ScoreHighlightSchema(_FromEngine):
    function_ref: str
    function_id: str | None
    function_name: str
    score: float
    label: str
    improvement: ImprovementPotentialSchema


class AnalysisResponse(_FromEngine):
    """Analysis report.

    Attributes:
        functions: Per-function interpretations in request order.
        strengths: Functions at or above the strength threshold, best first.
        weaknesses: Functions below the weakness threshold, weakest first.
    """

    functions: list[FunctionInterpretationSchema]
    strengths: list[ScoreHighlightSchema]
    weaknesses: list[ScoreHighlightSchema]


# ---------------------------------------------------------------------------
# Interpretation grid
# ---------------------------------------------------------------------------


class GridSyncResponse(BaseModel):
    """Result of regenerating grille_interpretation."""

    row_count: int


class GridDriftResponse(_FromEngine):
    """Differences between grille_interpretation and the catalog."""

    in_sync: bool
    missing: list[str]
    extra: list[str]
    changed: list[str]


class GridRowSchema(_FromEngine):
    """One persisted grille_interpretation row.

    Attributes:
        id_grille: Row identifier (catalog level id).
        fonction: Function id.
        thematique: Theme name, or None for global bands.
        score_min: Inclusive lower bound.
        score_max: Inclusive upper bound.
        niveau: Level label.
        description: Level description.
        recommandations: Recommended actions.
    """

    id_grille: str
    fonction: str
    thematique: str | None
    score_min: float
    score_max: float
    niveau: str
    description: str
    recommandations: str
