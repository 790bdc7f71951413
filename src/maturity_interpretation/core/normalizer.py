"""Free-text name canonicalisation.

Function and theme names reach the engine from forms, legacy rows and
display labels with inconsistent casing, accents and punctuation. Every
lookup that is not an exact match goes through ``normalize``.
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize(text: str | None) -> str:
    """Canonicalise a name for tolerant comparison.

    Steps: strip surrounding whitespace, lower-case, NFD-decompose and drop
    combining marks, then replace every character outside ``[a-z0-9]`` with
    an underscore. The result is idempotent.

    Args:
        text: Raw name. None and empty strings are accepted.

    Returns:
        Normalised key, e.g. ``"Gouvernance SI" -> "gouvernance_si"``.
        Empty string for None or empty input.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.strip().lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALNUM.sub("_", stripped)


def slugify_theme(name: str) -> str:
    """Build the id fragment used for templated thematic level ids.

    Lower-cases, strips diacritics, drops ``&`` and turns spaces into
    underscores, so ``"Détection & Réponse"`` becomes ``"detection__reponse"``.
    """
    decomposed = unicodedata.normalize("NFD", name.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.replace("&", "").replace(" ", "_")
