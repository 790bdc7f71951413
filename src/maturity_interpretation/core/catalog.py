"""Immutable maturity catalog and function alias resolution.

The catalog is assembled once from ``catalog_data`` by the pure
``build_catalog`` function and exposed as the read-only ``CATALOG``
singleton. Nothing mutates it after import, so concurrent readers need no
synchronisation.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from maturity_interpretation.core import catalog_data
from maturity_interpretation.core.models.catalog import (
    GlobalLevel,
    MaturityFunction,
    ThematicLevel,
    Theme,
)
from maturity_interpretation.core.normalizer import normalize, slugify_theme


@dataclass(frozen=True)
class MaturityCatalog:
    """Read-only registry of functions, thematic levels and aliases.

    Attributes:
        functions: Functions ordered by display order.
        thematic_levels: Every thematic level in declaration order.
        aliases: Normalised alternate spelling -> canonical function id.
        functions_by_id: Canonical function id -> function.
    """

    functions: tuple[MaturityFunction, ...]
    thematic_levels: tuple[ThematicLevel, ...]
    aliases: Mapping[str, str]
    functions_by_id: Mapping[str, MaturityFunction]

    @property
    def themes(self) -> tuple[Theme, ...]:
        return tuple(theme for function in self.functions for theme in function.themes)

    @property
    def global_levels(self) -> tuple[GlobalLevel, ...]:
        return tuple(
            level for function in self.functions for level in function.global_levels
        )

    def resolve_function(
        self, name_or_id: str | MaturityFunction | None
    ) -> MaturityFunction | None:
        """Resolve a free-text function reference to a catalogued function.

        Strategies, first match wins:
            1. alias table lookup on the normalised input
            2. exact id
            3. exact display name
            4. normalised id or display name

        Args:
            name_or_id: Id, display name, alias, or an already resolved function.

        Returns:
            The matching MaturityFunction, or None when nothing matches.
        """
        if isinstance(name_or_id, MaturityFunction):
            return name_or_id
        if not name_or_id:
            return None

        key = normalize(name_or_id)
        alias_target = self.aliases.get(key)
        if alias_target is not None and alias_target in self.functions_by_id:
            return self.functions_by_id[alias_target]

        exact = self.functions_by_id.get(name_or_id)
        if exact is not None:
            return exact

        for function in self.functions:
            if function.name == name_or_id:
                return function

        for function in self.functions:
            if key in (normalize(function.id), normalize(function.name)):
                return function

        return None

    def thematic_levels_for(self, function_id: str) -> tuple[ThematicLevel, ...]:
        """Return the thematic levels declared for one function."""
        return tuple(
            level for level in self.thematic_levels if level.function_id == function_id
        )


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def _build_global_levels(function_id: str) -> tuple[GlobalLevel, ...]:
    prefix = catalog_data.GLOBAL_LEVEL_ID_PREFIXES[function_id]
    texts = catalog_data.GLOBAL_LEVEL_TEXTS[function_id]
    return tuple(
        GlobalLevel(
            id=f"{prefix}_n{index}",
            function_id=function_id,
            score_range=band,
            label=label,
            description=description,
            recommendations=recommendations,
        )
        for index, (band, label, (description, recommendations)) in enumerate(
            zip(catalog_data.GLOBAL_BANDS, catalog_data.GLOBAL_LEVEL_LABELS, texts),
            start=1,
        )
    )


def _tiered_levels(
    function_id: str,
    id_prefix: str,
    theme_name: str,
    label_stem: str,
    texts: tuple[tuple[str, str], ...],
) -> list[ThematicLevel]:
    return [
        ThematicLevel(
            id=f"{id_prefix}_{suffix}",
            function_id=function_id,
            theme_name=theme_name,
            score_range=band,
            label=f"{label_stem} - {tier_label}",
            description=description,
            recommendations=recommendations,
        )
        for band, (suffix, tier_label), (description, recommendations) in zip(
            catalog_data.THEMATIC_BANDS, catalog_data.THEMATIC_TIER_SUFFIXES, texts
        )
    ]


def _build_thematic_levels(
    themes_by_function: Mapping[str, tuple[Theme, ...]],
) -> tuple[ThematicLevel, ...]:
    levels: list[ThematicLevel] = []
    for function_id, entries in catalog_data.CURATED_THEMATIC_LEVELS.items():
        declared = {theme.name for theme in themes_by_function.get(function_id, ())}
        for id_prefix, theme_name, label_stem, texts in entries:
            if theme_name not in declared:
                raise ValueError(
                    f"Curated levels {id_prefix!r} reference undeclared theme "
                    f"{theme_name!r} of function {function_id!r}"
                )
            levels.extend(
                _tiered_levels(function_id, id_prefix, theme_name, label_stem, texts)
            )
    for function_id, prefix in catalog_data.TEMPLATED_THEMATIC_PREFIXES.items():
        for theme in themes_by_function.get(function_id, ()):
            levels.extend(
                _tiered_levels(
                    function_id,
                    f"{prefix}_{slugify_theme(theme.name)}",
                    theme.name,
                    theme.name,
                    catalog_data.STANDARD_THEMATIC_TEXTS,
                )
            )
    return tuple(levels)


def build_catalog() -> MaturityCatalog:
    """Assemble the immutable catalog from the literal definitions.

    Pure: calling it twice yields equal catalogs.

    Raises:
        ValueError: If a theme or alias references an unknown function, a
            curated thematic level names a theme its function does not
            declare, or a function id is declared twice.
    """
    known_ids = [definition[0] for definition in catalog_data.FUNCTION_DEFINITIONS]
    if len(set(known_ids)) != len(known_ids):
        raise ValueError("Duplicate function id in catalog definitions")

    themes_by_function: dict[str, tuple[Theme, ...]] = {}
    for theme in catalog_data.THEMES:
        if theme.function_id not in known_ids:
            raise ValueError(
                f"Theme {theme.id!r} references unknown function {theme.function_id!r}"
            )
        themes_by_function[theme.function_id] = (
            *themes_by_function.get(theme.function_id, ()),
            theme,
        )

    functions = tuple(
        sorted(
            (
                MaturityFunction(
                    id=function_id,
                    name=name,
                    description=description,
                    display_order=display_order,
                    themes=themes_by_function.get(function_id, ()),
                    global_levels=_build_global_levels(function_id),
                )
                for function_id, name, description, display_order in (
                    catalog_data.FUNCTION_DEFINITIONS
                )
            ),
            key=lambda function: function.display_order,
        )
    )

    aliases: dict[str, str] = {}
    for alias, target in catalog_data.FUNCTION_ALIASES.items():
        if target not in known_ids:
            raise ValueError(f"Alias {alias!r} references unknown function {target!r}")
        aliases[normalize(alias)] = target

    return MaturityCatalog(
        functions=functions,
        thematic_levels=_build_thematic_levels(themes_by_function),
        aliases=MappingProxyType(aliases),
        functions_by_id=MappingProxyType({function.id: function for function in functions}),
    )


CATALOG: MaturityCatalog = build_catalog()


def get_catalog() -> MaturityCatalog:
    """Return the process-wide catalog singleton."""
    return CATALOG


def resolve_function(
    name_or_id: str | MaturityFunction | None,
) -> MaturityFunction | None:
    """Resolve a function reference against the process-wide catalog."""
    return CATALOG.resolve_function(name_or_id)
