"""
errors/taxonomy.py - Error classification system

Numbered error codes for every rule violation the container and ship
layers can raise. Codes are grouped by range so callers can branch on
the layer without matching exception types.
"""

from __future__ import annotations
from enum import Enum


class ErrorCategory(Enum):
    """Error categories."""
    # Container errors (1xxx)
    CONTAINER = "container"

    # Ship errors (2xxx)
    SHIP = "ship"

    # Configuration errors (6xxx)
    CONFIGURATION = "configuration"

    # Unclassified errors (9xxx)
    GENERAL = "general"


class ErrorCode(Enum):
    """Specific error codes."""

    # Container (1xxx)
    CNT_OVERFILL = 1001
    CNT_NEGATIVE_MASS = 1002
    CNT_TEMPERATURE = 1003
    CNT_UNKNOWN_PRODUCT = 1004

    # Ship (2xxx)
    SHP_FAILED = 2000
    SHP_CAPACITY = 2001
    SHP_OVERLOAD = 2002
    SHP_NOT_FOUND = 2003

    # Configuration (6xxx)
    CFG_MANIFEST = 6001

    # Unclassified (9xxx)
    GEN_FAILED = 9001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.CONTAINER
        if self.value < 3000:
            return ErrorCategory.SHIP
        if self.value < 7000:
            return ErrorCategory.CONFIGURATION
        return ErrorCategory.GENERAL
