"""
Container Models

Cargo container hierarchy: an abstract Container carrying the physical
attributes and the load/unload contract, and the three concrete variants
(liquid, gas, refrigerated) with their fill rules.

All masses in kilograms, dimensions in centimetres.

Loads are absolute: load(mass) replaces the current cargo mass rather than
adding to it. Every rule is checked before load_mass is touched, so a
rejected load leaves the container exactly as it was.

Containers are plain in-process objects and are not safe for concurrent
mutation without external locking.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional
import logging
import math

from ..core.constants import (
    GAS_RESIDUAL_FRACTION,
    HAZARDOUS_FILL_RATIO,
    NON_HAZARDOUS_FILL_RATIO,
    PRODUCT_TEMPERATURES,
)
from ..errors import (
    ContainershipError,
    InvalidMassError,
    OverfillException,
    TemperatureViolation,
    UnknownProductError,
)
from .hazard import HazardNotifier
from .serials import next_serial_number

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMERATIONS
# =============================================================================

class ContainerKind(Enum):
    """Container variants."""
    LIQUID = "liquid"
    GAS = "gas"
    REFRIGERATED = "refrigerated"

    @property
    def code(self) -> str:
        """Single-letter code used in serial numbers."""
        return KIND_CODES[self]


KIND_CODES = {
    ContainerKind.LIQUID: "L",
    ContainerKind.GAS: "G",
    ContainerKind.REFRIGERATED: "C",
}


# =============================================================================
# CONTAINER BASE
# =============================================================================

class Container(ABC):
    """
    Abstract cargo container.

    Attributes:
        serial_number: Unique identifier, fixed at construction
        load_mass: Current cargo mass (kg), changed only by load/unload
        height: Height (cm)
        weight: Tare weight (kg), excluding cargo
        depth: Depth (cm)
        max_load: Maximum cargo mass (kg)
    """

    kind: ContainerKind

    def __init__(
        self,
        height: float,
        weight: float,
        depth: float,
        max_load: float,
        serial_number: Optional[str] = None,
    ):
        self.height = height
        self.weight = weight
        self.depth = depth
        self.max_load = max_load
        self._serial_number = serial_number or next_serial_number(self.kind)
        self._load_mass = 0.0

    @property
    def serial_number(self) -> str:
        return self._serial_number

    @property
    def load_mass(self) -> float:
        return self._load_mass

    @property
    def total_mass(self) -> float:
        """Tare weight plus cargo (kg)."""
        return self.weight + self._load_mass

    def load(self, mass: float) -> None:
        """
        Set the cargo mass.

        Raises:
            InvalidMassError: If mass is negative or NaN
            OverfillException: If mass exceeds this container's fill limit
        """
        if mass < 0 or math.isnan(mass):
            raise InvalidMassError(mass, serial_number=self.serial_number)

        try:
            self._check_load(mass)
        except ContainershipError as e:
            logger.debug(f"Load of {mass} kg rejected for {self.serial_number}: {e}")
            raise

        self._load_mass = mass
        logger.debug(f"Loaded {mass} kg into {self.serial_number}")

    @abstractmethod
    def _check_load(self, mass: float) -> None:
        """Raise if mass violates this variant's rules. Must not mutate."""

    @abstractmethod
    def unload(self) -> None:
        """Remove cargo according to this variant's rules."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize container."""
        return {
            "serial_number": self.serial_number,
            "kind": self.kind.value,
            "load_mass": round(self.load_mass, 3),
            "height": self.height,
            "weight": self.weight,
            "depth": self.depth,
            "max_load": self.max_load,
        }

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(serial_number={self.serial_number!r}, "
                f"load_mass={self.load_mass}, max_load={self.max_load})")


# =============================================================================
# LIQUID CONTAINER
# =============================================================================

class LiquidContainer(HazardNotifier, Container):
    """
    Liquid cargo container.

    Hazardous cargo may fill at most 50% of max_load, anything else 90%.
    """

    kind = ContainerKind.LIQUID

    def __init__(
        self,
        height: float,
        weight: float,
        depth: float,
        max_load: float,
        is_hazardous: bool = False,
        serial_number: Optional[str] = None,
    ):
        super().__init__(height, weight, depth, max_load, serial_number)
        self.is_hazardous = is_hazardous

    @property
    def fill_limit(self) -> float:
        """Largest mass this container currently accepts (kg)."""
        ratio = HAZARDOUS_FILL_RATIO if self.is_hazardous else NON_HAZARDOUS_FILL_RATIO
        return self.max_load * ratio

    def _check_load(self, mass: float) -> None:
        if mass <= self.fill_limit:
            return
        if self.is_hazardous:
            message = "Cannot load more than 50% of capacity for hazardous load."
        else:
            message = "Cannot load more than 90% of capacity for non-hazardous load."
        raise OverfillException(
            message,
            serial_number=self.serial_number,
            attempted_kg=mass,
            limit_kg=self.fill_limit,
        )

    def unload(self) -> None:
        self._load_mass = 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["is_hazardous"] = self.is_hazardous
        return data


# =============================================================================
# GAS CONTAINER
# =============================================================================

class GasContainer(HazardNotifier, Container):
    """
    Pressurised gas container.

    Unloading leaves 5% of the cargo behind, so repeated unloads keep
    shrinking the residue without ever reaching zero.
    """

    kind = ContainerKind.GAS

    def __init__(
        self,
        height: float,
        weight: float,
        depth: float,
        max_load: float,
        pressure: float = 0.0,
        serial_number: Optional[str] = None,
    ):
        super().__init__(height, weight, depth, max_load, serial_number)
        self.pressure = pressure  # atm

    def _check_load(self, mass: float) -> None:
        if mass > self.max_load:
            raise OverfillException(
                "Load mass exceeds maximum load capacity.",
                serial_number=self.serial_number,
                attempted_kg=mass,
                limit_kg=self.max_load,
            )

    def unload(self) -> None:
        self._load_mass *= GAS_RESIDUAL_FRACTION

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["pressure"] = self.pressure
        return data


# =============================================================================
# REFRIGERATED CONTAINER
# =============================================================================

class RefrigeratedContainer(Container):
    """
    Refrigerated container for a single product type.

    The set temperature must not be below the product's required
    temperature. The product is looked up when loading, so an unknown
    product type only surfaces on load().
    """

    kind = ContainerKind.REFRIGERATED

    def __init__(
        self,
        height: float,
        weight: float,
        depth: float,
        max_load: float,
        product_type: str,
        temperature: float,
        serial_number: Optional[str] = None,
    ):
        super().__init__(height, weight, depth, max_load, serial_number)
        self.product_type = product_type
        self.temperature = temperature  # °C

    @property
    def required_temperature(self) -> float:
        """
        Minimum temperature for the product (°C).

        Raises:
            UnknownProductError: If product_type is not in the table
        """
        try:
            return PRODUCT_TEMPERATURES[self.product_type]
        except KeyError:
            raise UnknownProductError(
                self.product_type, serial_number=self.serial_number
            ) from None

    def _check_load(self, mass: float) -> None:
        if mass > self.max_load:
            raise OverfillException(
                "Load mass exceeds maximum load capacity.",
                serial_number=self.serial_number,
                attempted_kg=mass,
                limit_kg=self.max_load,
            )

        required = self.required_temperature
        if required > self.temperature:
            raise TemperatureViolation(
                serial_number=self.serial_number,
                temperature=self.temperature,
                required_temperature=required,
            )

    def unload(self) -> None:
        self._load_mass = 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["product_type"] = self.product_type
        data["temperature"] = self.temperature
        return data
