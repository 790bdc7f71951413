"""Persistence adapters for the interpretation grid."""
