"""Interpretation engine: catalog, normalizer, level resolver and fallback."""
