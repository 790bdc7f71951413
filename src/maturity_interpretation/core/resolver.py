"""Score to maturity level resolution.

Global resolution picks the first global level of the resolved function
whose inclusive range contains the score. Thematic resolution tries three
strategies in order:

    1. exact     — function id and verbatim theme name
    2. normalised — normalised function id/name and normalised theme name
    3. fallback  — generic three-tier level, always succeeds

Scores are never clamped. Nothing here raises for any input.
"""

import math

from maturity_interpretation.core.catalog import CATALOG, MaturityCatalog
from maturity_interpretation.core.fallback import Locale, generic_level
from maturity_interpretation.core.models.catalog import (
    GenericLevel,
    GlobalLevel,
    MaturityFunction,
    ThematicLevel,
    first_in_range,
)
from maturity_interpretation.core.normalizer import normalize
from maturity_interpretation.observability import get_logger
from maturity_interpretation.settings import get_settings

logger = get_logger(__name__)

FunctionRef = str | MaturityFunction | None


class LevelResolver:
    """Resolves global and thematic levels against a catalog.

    Stateless apart from its catalog and fallback locale, so a single
    instance can serve concurrent requests.
    """

    def __init__(
        self,
        catalog: MaturityCatalog | None = None,
        locale: Locale | None = None,
    ) -> None:
        """Initialise the resolver.

        Args:
            catalog: Catalog to resolve against. Defaults to the singleton.
            locale: Locale for generated fallback levels. Defaults to the
                configured ``fallback_locale``.
        """
        self._catalog = catalog if catalog is not None else CATALOG
        self._locale = locale if locale is not None else get_settings().fallback_locale

    @property
    def catalog(self) -> MaturityCatalog:
        return self._catalog

    @property
    def locale(self) -> Locale:
        return self._locale

    def resolve_global_level(
        self, function_ref: FunctionRef, score: float
    ) -> GlobalLevel | None:
        """Return the global level covering score for the referenced function.

        Args:
            function_ref: Function id, name, alias or resolved function.
            score: Aggregate function score.

        Returns:
            First matching GlobalLevel, or None when the function is unknown
            or no level covers the score (gap, out of domain, NaN).
        """
        function = self._catalog.resolve_function(function_ref)
        if function is None:
            return None
        return first_in_range(function.global_levels, score)

    def resolve_thematic_level(
        self,
        function_ref: FunctionRef,
        theme_name: str,
        score: float,
    ) -> ThematicLevel | GenericLevel:
        """Return the thematic level for a theme score. Never returns None.

        Args:
            function_ref: Function id, name, alias or resolved function.
            theme_name: Theme name as supplied by the caller.
            score: Theme score.

        Returns:
            Catalogued ThematicLevel when one matches, otherwise a GenericLevel.
        """
        if math.isnan(score):
            logger.warning(
                "NaN theme score classified as low tier",
                function_ref=_describe(function_ref),
                theme_name=theme_name,
            )
            return generic_level(theme_name, score, self._locale)

        function = self._catalog.resolve_function(function_ref)
        if function is None:
            return generic_level(theme_name, score, self._locale)

        candidates = self._catalog.thematic_levels_for(function.id)
        for level in candidates:
            if level.theme_name == theme_name and level.score_range.contains(score):
                return level

        function_keys = {normalize(function.id), normalize(function.name)}
        theme_key = normalize(theme_name)
        for level in self._catalog.thematic_levels:
            if (
                normalize(level.function_id) in function_keys
                and normalize(level.theme_name) == theme_key
                and level.score_range.contains(score)
            ):
                return level

        return generic_level(theme_name, score, self._locale)


def _describe(function_ref: FunctionRef) -> str | None:
    if isinstance(function_ref, MaturityFunction):
        return function_ref.id
    return function_ref


def resolve_global_level(function_ref: FunctionRef, score: float) -> GlobalLevel | None:
    """Resolve a global level against the process-wide catalog."""
    return LevelResolver().resolve_global_level(function_ref, score)


def resolve_thematic_level(
    function_ref: FunctionRef,
    theme_name: str,
    score: float,
) -> ThematicLevel | GenericLevel:
    """Resolve a thematic level against the process-wide catalog.

    Generic fallback levels use the configured ``fallback_locale``.
    """
    return LevelResolver().resolve_thematic_level(function_ref, theme_name, score)
