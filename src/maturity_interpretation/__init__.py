"""Maturity interpretation service.

Translates digital-maturity scores into qualitative levels with narrative
descriptions and recommendations, across DevSecOps, cybersecurity, IT
operating model, IS governance and data acculturation.
"""

__version__ = "0.1.0"
