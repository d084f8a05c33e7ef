"""Core business logic layer.

Subpackages:
- calendar: the freshness-calendar layout engine
- pantry: list and badge analysis helpers
"""
__all__ = ["calendar", "pantry"]
