"""Unit tests for the maturity catalog and function resolution."""

import dataclasses

import pytest

from maturity_interpretation.core import catalog_data
from maturity_interpretation.core.catalog import (
    CATALOG,
    MaturityCatalog,
    build_catalog,
    get_catalog,
    resolve_function,
)
from maturity_interpretation.core.normalizer import normalize

_EXPECTED_THEME_COUNTS: dict[str, int] = {
    "devsecops": 9,
    "cybersecurite": 8,
    "modele_operationnel": 7,
    "gouvernance_si": 7,
    "acculturation_data": 8,
}


class TestCatalogContent:
    """Tests for the assembled catalog."""

    def test_singleton(self) -> None:
        assert get_catalog() is CATALOG

    def test_builder_is_pure(self) -> None:
        assert build_catalog() == build_catalog()

    def test_functions_in_display_order(self, catalog: MaturityCatalog) -> None:
        assert [function.id for function in catalog.functions] == [
            "devsecops",
            "cybersecurite",
            "modele_operationnel",
            "gouvernance_si",
            "acculturation_data",
        ]
        orders = [function.display_order for function in catalog.functions]
        assert orders == sorted(orders)

    @pytest.mark.parametrize(("function_id", "count"), list(_EXPECTED_THEME_COUNTS.items()))
    def test_theme_counts(self, catalog: MaturityCatalog, function_id: str, count: int) -> None:
        assert len(catalog.functions_by_id[function_id].themes) == count

    def test_themes_reference_their_owner(self, catalog: MaturityCatalog) -> None:
        for function in catalog.functions:
            assert all(theme.function_id == function.id for theme in function.themes)

    def test_function_ids_unique(self, catalog: MaturityCatalog) -> None:
        ids = [function.id for function in catalog.functions]
        assert len(ids) == len(set(ids))

    def test_five_global_levels_covering_zero_to_five(self, catalog: MaturityCatalog) -> None:
        for function in catalog.functions:
            levels = function.global_levels
            assert len(levels) == 5
            assert levels[0].score_range.score_min == 0.0
            assert levels[-1].score_range.score_max == 5.0
            for lower, upper in zip(levels, levels[1:]):
                assert lower.score_range.score_max == upper.score_range.score_min

    def test_global_level_ids_and_labels(self, catalog: MaturityCatalog) -> None:
        levels = catalog.functions_by_id["cybersecurite"].global_levels
        assert [level.id for level in levels] == [f"cyber_n{n}" for n in range(1, 6)]
        assert levels[-1].label == "Niveau 5 - Optimisé"

    def test_three_thematic_levels_per_theme(self, catalog: MaturityCatalog) -> None:
        for theme in catalog.themes:
            levels = [
                level
                for level in catalog.thematic_levels
                if level.function_id == theme.function_id and level.theme_name == theme.name
            ]
            assert len(levels) == 3, theme.name

    def test_thematic_level_ids_unique(self, catalog: MaturityCatalog) -> None:
        ids = [level.id for level in catalog.thematic_levels]
        assert len(ids) == len(set(ids))

    def test_curated_devsecops_label(self, catalog: MaturityCatalog) -> None:
        by_id = {level.id: level for level in catalog.thematic_levels}
        assert by_id["vuln_code_mid"].label == "Vulnérabilités & Code - Intermédiaire"
        assert by_id["vuln_code_mid"].theme_name == "Gestion des vulnérabilités & Sûreté du code"

    def test_templated_level_id(self, catalog: MaturityCatalog) -> None:
        by_id = {level.id: level for level in catalog.thematic_levels}
        level = by_id["cyber_detection__reponse_high"]
        assert level.theme_name == "Détection & Réponse"
        assert level.label == "Détection & Réponse - Avancé"

    def test_entities_are_frozen(self, catalog: MaturityCatalog) -> None:
        function = catalog.functions[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            function.name = "changed"  # type: ignore[misc]

    def test_alias_table_is_read_only(self, catalog: MaturityCatalog) -> None:
        with pytest.raises(TypeError):
            catalog.aliases["new"] = "devsecops"  # type: ignore[index]

    def test_alias_keys_are_normalised(self, catalog: MaturityCatalog) -> None:
        assert all(normalize(key) == key for key in catalog.aliases)


class TestResolveFunction:
    """Tests for resolve_function()."""

    def test_alias_equivalence(self) -> None:
        expected = resolve_function("cybersecurite")
        assert expected is not None
        assert resolve_function("cybersécurité") == expected
        assert resolve_function("cyber") == expected

    def test_accented_spaced_alias(self) -> None:
        function = resolve_function("modèle opérationnel")
        assert function is not None
        assert function.id == "modele_operationnel"

    def test_exact_id(self) -> None:
        function = resolve_function("gouvernance_si")
        assert function is not None
        assert function.name == "Gouvernance SI"

    def test_display_name(self) -> None:
        function = resolve_function("Acculturation Data")
        assert function is not None
        assert function.id == "acculturation_data"

    def test_case_and_whitespace_insensitive(self) -> None:
        function = resolve_function("  DEVSECOPS ")
        assert function is not None
        assert function.id == "devsecops"

    def test_resolved_function_passes_through(self, catalog: MaturityCatalog) -> None:
        function = catalog.functions[2]
        assert resolve_function(function) is function

    @pytest.mark.parametrize("value", ["unknown", "", None, "niveau"])
    def test_unknown_returns_none(self, value: str | None) -> None:
        assert resolve_function(value) is None


class TestBuildCatalogValidation:
    """Tests for reference checks in build_catalog()."""

    def test_orphan_theme_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        orphan = dataclasses.replace(catalog_data.THEMES[0], id="orphan", function_id="ghost")
        monkeypatch.setattr(catalog_data, "THEMES", (*catalog_data.THEMES, orphan))

        with pytest.raises(ValueError, match="unknown function 'ghost'"):
            build_catalog()

    def test_duplicate_function_id_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        definitions = catalog_data.FUNCTION_DEFINITIONS
        monkeypatch.setattr(
            catalog_data, "FUNCTION_DEFINITIONS", (*definitions, definitions[0])
        )

        with pytest.raises(ValueError, match="Duplicate function id"):
            build_catalog()

    def test_dangling_alias_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            catalog_data,
            "FUNCTION_ALIASES",
            {**catalog_data.FUNCTION_ALIASES, "fin": "finance"},
        )

        with pytest.raises(ValueError, match="Alias 'fin' references unknown function"):
            build_catalog()

    def test_curated_level_with_undeclared_theme_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        entries = catalog_data.CURATED_THEMATIC_LEVELS["devsecops"]
        prefix, _, label_stem, texts = entries[0]
        typo = (prefix, "Culture et Collaboration", label_stem, texts)
        monkeypatch.setattr(
            catalog_data,
            "CURATED_THEMATIC_LEVELS",
            {**catalog_data.CURATED_THEMATIC_LEVELS, "devsecops": (typo, *entries[1:])},
        )

        with pytest.raises(ValueError, match="undeclared theme 'Culture et Collaboration'"):
            build_catalog()

    def test_shipped_definitions_are_consistent(self) -> None:
        assert build_catalog() == CATALOG
