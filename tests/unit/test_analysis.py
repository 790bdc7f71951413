"""Unit tests for analysis report aggregation."""

import math

import pytest

from maturity_interpretation.core.analysis import (
    FunctionScoreInput,
    ImprovementPriority,
    MaturityAnalyzer,
    ThemeScoreInput,
    improvement_potential,
)


class TestImprovementPotential:
    """Tests for improvement_potential()."""

    def test_low_score_is_high_priority(self) -> None:
        potential = improvement_potential(1.2)
        assert potential.points_possible == 3.8
        assert potential.percentage == 76
        assert potential.priority is ImprovementPriority.HIGH

    @pytest.mark.parametrize(
        ("score", "priority"),
        [
            (2.9, ImprovementPriority.HIGH),
            (3.0, ImprovementPriority.MEDIUM),
            (3.9, ImprovementPriority.MEDIUM),
            (4.0, ImprovementPriority.LOW),
            (5.0, ImprovementPriority.LOW),
        ],
    )
    def test_priority_thresholds(self, score: float, priority: ImprovementPriority) -> None:
        assert improvement_potential(score).priority is priority

    def test_top_score_has_no_potential(self) -> None:
        potential = improvement_potential(5.0)
        assert potential.points_possible == 0.0
        assert potential.percentage == 0

    def test_custom_scale(self) -> None:
        potential = improvement_potential(50.0, score_max=100.0)
        assert potential.points_possible == 50.0
        assert potential.percentage == 50

    def test_nan_counts_as_zero(self) -> None:
        potential = improvement_potential(math.nan)
        assert potential.points_possible == 5.0
        assert potential.priority is ImprovementPriority.HIGH


class TestMaturityAnalyzer:
    """Tests for MaturityAnalyzer.analyze()."""

    def test_catalogued_function(self, analyzer: MaturityAnalyzer) -> None:
        report = analyzer.analyze(
            [
                FunctionScoreInput(
                    function_ref="DevSecOps",
                    score=3.6,
                    themes=(
                        ThemeScoreInput("Culture & Collaboration", 4.0),
                        ThemeScoreInput("Unlisted Theme", 2.0),
                    ),
                )
            ]
        )
        (function,) = report.functions
        assert function.function_id == "devsecops"
        assert function.level_id == "devsecops_n4"
        assert function.label == "Niveau 4 - Géré"
        assert not function.is_generic

        curated, generic = function.themes
        assert curated.level_id == "cult_collab_high"
        assert not curated.is_generic
        assert generic.level_id is None
        assert generic.label == "Unlisted Theme - Intermediate"
        assert generic.is_generic

    def test_unknown_function_gets_generic_global_tier(self, analyzer: MaturityAnalyzer) -> None:
        report = analyzer.analyze(
            [
                FunctionScoreInput(
                    function_ref="Finance",
                    score=2.7,
                    themes=(ThemeScoreInput("Budget", 3.8),),
                )
            ]
        )
        (function,) = report.functions
        assert function.function_id is None
        assert function.function_name == "Finance"
        assert function.is_generic
        assert function.label == "Level 3 - Measured"
        assert function.themes[0].label == "Budget - Advanced"

    @pytest.mark.usefixtures("french_fallback_locale")
    def test_default_analyzer_uses_configured_locale(self) -> None:
        report = MaturityAnalyzer().analyze(
            [FunctionScoreInput("Finance", 2.0, themes=(ThemeScoreInput("T", 2.0),))]
        )
        (function,) = report.functions
        assert function.label == "Niveau 2 - Défini"
        assert function.themes[0].label == "T - Intermédiaire"

    def test_out_of_domain_global_score_is_generic(self, analyzer: MaturityAnalyzer) -> None:
        report = analyzer.analyze([FunctionScoreInput("cyber", 5.2)])
        (function,) = report.functions
        assert function.function_id == "cybersecurite"
        assert function.is_generic
        assert function.label == "Level 5 - Optimized"

    def test_strengths_and_weaknesses(self, analyzer: MaturityAnalyzer) -> None:
        report = analyzer.analyze(
            [
                FunctionScoreInput("devsecops", 3.5),
                FunctionScoreInput("cybersecurite", 1.0),
                FunctionScoreInput("modele_operationnel", 4.6),
                FunctionScoreInput("gouvernance_si", 2.5),
                FunctionScoreInput("acculturation_data", 2.1),
            ]
        )
        assert [item.function_id for item in report.strengths] == [
            "modele_operationnel",
            "devsecops",
        ]
        assert [item.function_id for item in report.weaknesses] == [
            "cybersecurite",
            "acculturation_data",
        ]
        assert report.weaknesses[0].improvement.priority is ImprovementPriority.HIGH

    def test_report_preserves_input_order(self, analyzer: MaturityAnalyzer) -> None:
        report = analyzer.analyze(
            [FunctionScoreInput("data", 1.0), FunctionScoreInput("devsecops", 4.0)]
        )
        assert [item.function_id for item in report.functions] == [
            "acculturation_data",
            "devsecops",
        ]

    def test_empty_input(self, analyzer: MaturityAnalyzer) -> None:
        report = analyzer.analyze([])
        assert report.functions == ()
        assert report.strengths == ()
        assert report.weaknesses == ()

    def test_custom_thresholds(self) -> None:
        strict = MaturityAnalyzer(strength_threshold=4.5, weakness_threshold=3.0)
        report = strict.analyze(
            [FunctionScoreInput("devsecops", 4.0), FunctionScoreInput("cyber", 2.9)]
        )
        assert report.strengths == ()
        assert [item.function_id for item in report.weaknesses] == ["cybersecurite"]
