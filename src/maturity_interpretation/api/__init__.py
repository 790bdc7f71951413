"""HTTP API for the maturity interpretation service."""
