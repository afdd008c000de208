"""
errors/exceptions.py - Container and ship exceptions

Every business-rule rejection raised by the container and ship layers.
All of them derive from ContainershipError so callers can catch them
uniformly, log the message and carry on. None of them is transient,
so there is nothing to retry.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .taxonomy import ErrorCode


class ContainershipError(Exception):
    """Base exception for container and ship operations."""

    code: ErrorCode = ErrorCode.GEN_FAILED

    def __init__(
        self,
        message: str,
        serial_number: Optional[str] = None,
        code: Optional[ErrorCode] = None,
    ):
        super().__init__(message)
        self.message = message
        self.serial_number = serial_number
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": self.code.value,
            "category": self.code.category.value,
            "message": self.message,
            "serial_number": self.serial_number,
        }


# =============================================================================
# CONTAINER ERRORS
# =============================================================================

class OverfillException(ContainershipError):
    """Raised when a load would exceed a container's fill threshold."""

    code = ErrorCode.CNT_OVERFILL

    def __init__(
        self,
        message: str,
        serial_number: Optional[str] = None,
        attempted_kg: Optional[float] = None,
        limit_kg: Optional[float] = None,
    ):
        super().__init__(message, serial_number=serial_number)
        self.attempted_kg = attempted_kg
        self.limit_kg = limit_kg


class InvalidMassError(ContainershipError, ValueError):
    """Raised when a load mass is negative or not a number."""

    code = ErrorCode.CNT_NEGATIVE_MASS

    def __init__(self, mass: float, serial_number: Optional[str] = None):
        super().__init__(
            f"Load mass must be a non-negative number (got {mass}).",
            serial_number=serial_number,
        )
        self.mass = mass


class TemperatureViolation(ContainershipError):
    """Raised when a refrigerated container is set below its product's temperature."""

    code = ErrorCode.CNT_TEMPERATURE

    def __init__(
        self,
        message: str = "The temperature is too low for this product.",
        serial_number: Optional[str] = None,
        temperature: Optional[float] = None,
        required_temperature: Optional[float] = None,
    ):
        super().__init__(message, serial_number=serial_number)
        self.temperature = temperature
        self.required_temperature = required_temperature


class UnknownProductError(ContainershipError, LookupError):
    """Raised when a product type has no entry in the temperature table."""

    code = ErrorCode.CNT_UNKNOWN_PRODUCT

    def __init__(self, product_type: str, serial_number: Optional[str] = None):
        super().__init__(
            f"Unknown product type: {product_type!r}",
            serial_number=serial_number,
        )
        self.product_type = product_type


# =============================================================================
# SHIP ERRORS
# =============================================================================

class ShipError(ContainershipError):
    """Base exception for ship membership operations."""

    code = ErrorCode.SHP_FAILED


class CapacityExceeded(ShipError):
    """Raised when the ship already carries its maximum container count."""

    code = ErrorCode.SHP_CAPACITY

    def __init__(
        self,
        message: str = "Cannot load more containers. The ship is full.",
        serial_number: Optional[str] = None,
        max_container_count: int = 0,
    ):
        super().__init__(message, serial_number=serial_number)
        self.max_container_count = max_container_count


class OverloadExceeded(ShipError):
    """Raised when boarding a container would exceed the ship's weight limit."""

    code = ErrorCode.SHP_OVERLOAD

    def __init__(
        self,
        message: str = "Cannot load the container. The ship would be overloaded.",
        serial_number: Optional[str] = None,
        attempted_kg: float = 0.0,
        limit_kg: float = 0.0,
    ):
        super().__init__(message, serial_number=serial_number)
        self.attempted_kg = attempted_kg
        self.limit_kg = limit_kg

    def __str__(self) -> str:
        return f"{self.message} ({self.attempted_kg:.1f} kg / {self.limit_kg:.1f} kg)"


class ContainerNotFound(ShipError, LookupError):
    """Raised when no container with the given serial number is aboard."""

    code = ErrorCode.SHP_NOT_FOUND

    def __init__(self, serial_number: str):
        super().__init__(
            f"No container with serial number {serial_number} found on the ship.",
            serial_number=serial_number,
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ManifestError(ContainershipError):
    """Raised when a manifest cannot be read or does not match its schema."""

    code = ErrorCode.CFG_MANIFEST

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
