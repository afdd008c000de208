"""
errors/ - Error Taxonomy

Exception hierarchy and numbered error codes for container and
ship rule violations.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorCode,
)

from .exceptions import (
    ContainershipError,
    OverfillException,
    InvalidMassError,
    TemperatureViolation,
    UnknownProductError,
    ShipError,
    CapacityExceeded,
    OverloadExceeded,
    ContainerNotFound,
    ManifestError,
)

__all__ = [
    # Taxonomy
    "ErrorCategory",
    "ErrorCode",
    # Exceptions
    "ContainershipError",
    "OverfillException",
    "InvalidMassError",
    "TemperatureViolation",
    "UnknownProductError",
    "ShipError",
    "CapacityExceeded",
    "OverloadExceeded",
    "ContainerNotFound",
    "ManifestError",
]
