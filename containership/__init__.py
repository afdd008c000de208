"""
containership - Cargo containers and the ship that carries them.

Containers enforce their own fill rules on load/unload; the ship enforces
container count and total weight limits on boarding.
"""

from .containers import (
    ContainerKind,
    Container,
    LiquidContainer,
    GasContainer,
    RefrigeratedContainer,
    HazardNotifier,
    can_notify_hazard,
)

from .ship import Ship

from .errors import (
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

__version__ = "1.0.0"

__all__ = [
    # Containers
    "ContainerKind",
    "Container",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",
    "HazardNotifier",
    "can_notify_hazard",
    # Ship
    "Ship",
    # Errors
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
