"""
containers/ - Cargo Container Models

Container hierarchy with per-variant loading rules, the hazard
notification capability and serial number assignment.
"""

from .models import (
    # Enumerations
    ContainerKind,

    # Containers
    Container,
    LiquidContainer,
    GasContainer,
    RefrigeratedContainer,
)

from .hazard import (
    HazardNotifier,
    can_notify_hazard,
)

from .serials import (
    SerialNumberGenerator,
    get_serial_generator,
    set_serial_generator,
    next_serial_number,
)

__all__ = [
    # Enumerations
    "ContainerKind",

    # Containers
    "Container",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",

    # Hazard capability
    "HazardNotifier",
    "can_notify_hazard",

    # Serial numbers
    "SerialNumberGenerator",
    "get_serial_generator",
    "set_serial_generator",
    "next_serial_number",
]
