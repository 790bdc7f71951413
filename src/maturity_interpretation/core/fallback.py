"""Deterministic fallback interpretations.

Used when the catalog has no level for a theme or function. Thematic
fallback has three tiers split at 1.5 and 3.5; the function-level fallback
has five tiers split at 1.5, 2.5, 3.5 and 4.5. Texts exist in English and
in the original platform's French.
"""

import math
from typing import Literal

from maturity_interpretation.core.models.catalog import (
    ADVANCED_THRESHOLD,
    INTERMEDIATE_THRESHOLD,
    FallbackTier,
    GenericGlobalLevel,
    GenericLevel,
)

Locale = Literal["en", "fr"]
DEFAULT_LOCALE: Locale = "en"

# tier -> (label suffix, description, recommendations)
_THEMATIC_TEXTS: dict[str, dict[FallbackTier, tuple[str, str, str]]] = {
    "en": {
        FallbackTier.ADVANCED: (
            "Advanced",
            "Advanced maturity. Practices are well established, measured and "
            "integrated into processes.",
            "Capitalise on the gains. Promote innovation, the sharing of good "
            "practices and operational excellence.",
        ),
        FallbackTier.INTERMEDIATE: (
            "Intermediate",
            "Intermediate maturity. Practices are partially defined and being "
            "structured.",
            "Standardise and reinforce existing processes. Encourage continuous "
            "improvement.",
        ),
        FallbackTier.LOW: (
            "Low",
            "Low maturity. Practices are informal and the approach is mostly reactive.",
            "Establish the foundations. Put basic practices in place and raise "
            "awareness across the teams.",
        ),
    },
    "fr": {
        FallbackTier.ADVANCED: (
            "Avancé",
            "Niveau avancé. Pratiques bien établies, mesurées et intégrées dans les "
            "processus.",
            "Capitaliser sur les acquis. Promouvoir l'innovation, le partage de bonnes "
            "pratiques et l'excellence opérationnelle.",
        ),
        FallbackTier.INTERMEDIATE: (
            "Intermédiaire",
            "Niveau de maturité moyen. Pratiques partiellement définies et en cours de "
            "structuration.",
            "Standardiser et renforcer les processus existants. Encourager "
            "l'amélioration continue.",
        ),
        FallbackTier.LOW: (
            "Faible",
            "Maturité faible sur cette thématique. Pratiques peu formalisées, approche "
            "majoritairement réactive.",
            "Structurer les fondations. Mettre en place des pratiques de base et "
            "sensibiliser les équipes.",
        ),
    },
}

# Lower bound of each function-level tier, highest first.
GLOBAL_TIER_THRESHOLDS: tuple[tuple[float, int], ...] = (
    (4.5, 5),
    (3.5, 4),
    (2.5, 3),
    (1.5, 2),
)

# rank -> (label, description, recommendations)
_GLOBAL_TEXTS: dict[str, dict[int, tuple[str, str, str]]] = {
    "en": {
        5: (
            "Level 5 - Optimized",
            "Operational excellence with continuous optimisation.",
            "Sustain excellence through continuous innovation. Explore new "
            "technologies and share good practices.",
        ),
        4: (
            "Level 4 - Managed",
            "Mature processes with quantitative measures and continuous improvement.",
            "Optimise existing processes. Develop predictive mechanisms and "
            "strengthen automation.",
        ),
        3: (
            "Level 3 - Measured",
            "Defined and measured processes. Consistent approach.",
            "Improve metrics and automation. Strengthen the culture of continuous "
            "improvement.",
        ),
        2: (
            "Level 2 - Defined",
            "Documented processes with uneven application.",
            "Standardise practices. Improve coordination between teams and develop "
            "consistent indicators.",
        ),
        1: (
            "Level 1 - Initial",
            "Ad hoc approach with few formalised processes.",
            "Establish a baseline framework. Formalise the main processes and "
            "improve visibility.",
        ),
    },
    "fr": {
        5: (
            "Niveau 5 - Optimisé",
            "Excellence opérationnelle avec optimisation continue.",
            "Maintenir l'excellence par l'innovation continue. Explorer les nouvelles "
            "technologies et partager les bonnes pratiques.",
        ),
        4: (
            "Niveau 4 - Géré",
            "Processus matures avec mesures quantitatives et amélioration continue.",
            "Optimiser les processus existants. Développer des mécanismes prédictifs "
            "et renforcer l'automatisation.",
        ),
        3: (
            "Niveau 3 - Mesuré",
            "Processus définis et mesurés. Approche cohérente.",
            "Améliorer les métriques et l'automatisation. Renforcer la culture "
            "d'amélioration continue.",
        ),
        2: (
            "Niveau 2 - Défini",
            "Processus documentés mais application inégale.",
            "Standardiser les pratiques. Améliorer la coordination entre équipes et "
            "développer des indicateurs cohérents.",
        ),
        1: (
            "Niveau 1 - Initial",
            "Approche ad hoc avec peu de processus formalisés.",
            "Établir un cadre de base. Formaliser les processus principaux et "
            "améliorer la visibilité.",
        ),
    },
}


def fallback_tier(score: float) -> FallbackTier:
    """Classify a score into one of the three fallback tiers.

    NaN is classified as LOW.
    """
    if math.isnan(score):
        return FallbackTier.LOW
    if score >= ADVANCED_THRESHOLD:
        return FallbackTier.ADVANCED
    if score >= INTERMEDIATE_THRESHOLD:
        return FallbackTier.INTERMEDIATE
    return FallbackTier.LOW


def generic_level(
    theme_name: str,
    score: float,
    locale: Locale = DEFAULT_LOCALE,
) -> GenericLevel:
    """Synthesise a thematic interpretation for an uncatalogued theme.

    Args:
        theme_name: Theme name, echoed verbatim into the label.
        score: Theme score, expected in [0, 5]. Not clamped.
        locale: 'en' or 'fr'. Unknown locales use English.

    Returns:
        GenericLevel with label ``"{theme_name} - {tier label}"``.
    """
    tier = fallback_tier(score)
    suffix, description, recommendations = _THEMATIC_TEXTS.get(
        locale, _THEMATIC_TEXTS[DEFAULT_LOCALE]
    )[tier]
    return GenericLevel(
        theme_name=theme_name,
        tier=tier,
        label=f"{theme_name} - {suffix}",
        description=description,
        recommendations=recommendations,
    )


def generic_global_level(
    score: float,
    locale: Locale = DEFAULT_LOCALE,
) -> GenericGlobalLevel:
    """Synthesise a five-tier interpretation for a function's aggregate score.

    Used by the analysis layer when the function is not catalogued. NaN and
    negative scores fall into tier 1.

    Args:
        score: Aggregate function score.
        locale: 'en' or 'fr'. Unknown locales use English.

    Returns:
        GenericGlobalLevel for the matching tier.
    """
    rank = 1
    if not math.isnan(score):
        for threshold, candidate in GLOBAL_TIER_THRESHOLDS:
            if score >= threshold:
                rank = candidate
                break
    label, description, recommendations = _GLOBAL_TEXTS.get(
        locale, _GLOBAL_TEXTS[DEFAULT_LOCALE]
    )[rank]
    return GenericGlobalLevel(
        rank=rank,
        label=label,
        description=description,
        recommendations=recommendations,
    )
