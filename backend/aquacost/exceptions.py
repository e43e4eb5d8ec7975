"""Custom exception hierarchy for the AquaCost engine.

User input problems are never raised; they are returned as messages by the
validator. These exceptions signal a defect in the catalog or the engine.
"""

from __future__ import annotations


class AquaCostError(Exception):
    """Base exception for all AquaCost errors."""


class CatalogError(AquaCostError):
    """Raised when a material catalog is malformed or cannot be loaded."""


class CostCompositionError(AquaCostError):
    """Raised when a cost breakdown cannot be assembled consistently."""
