"""
Ship Model

A ship carries containers up to a container count and a total weight.
The ship owns the membership list only: containers are created elsewhere,
keep their own cargo state, and outlive their time aboard.

Weight convention: max_weight_mt is in metric tonnes, container weights
and cargo masses are in kilograms.

Not safe for concurrent mutation without external locking.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List
import logging

from ..containers.models import Container
from ..core.constants import MT_TO_KG
from ..errors import CapacityExceeded, ContainerNotFound, OverloadExceeded

logger = logging.getLogger(__name__)


@dataclass
class Ship:
    """
    Container ship.

    Attributes:
        max_speed_kts: Maximum speed (knots)
        max_container_count: Maximum number of containers aboard
        max_weight_mt: Maximum total container weight, tare plus cargo (MT)
        name: Label used in logs and reports
        containers: Containers currently aboard, in boarding order
    """
    max_speed_kts: float
    max_container_count: int
    max_weight_mt: float
    name: str = ""
    containers: List[Container] = field(default_factory=list)

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def container_count(self) -> int:
        return len(self.containers)

    @property
    def total_weight_kg(self) -> float:
        """Tare plus cargo of every container aboard (kg)."""
        return sum(c.weight + c.load_mass for c in self.containers)

    @property
    def max_weight_kg(self) -> float:
        return self.max_weight_mt * MT_TO_KG

    @property
    def remaining_capacity(self) -> int:
        return max(0, self.max_container_count - self.container_count)

    @property
    def remaining_weight_kg(self) -> float:
        return self.max_weight_kg - self.total_weight_kg

    @property
    def is_full(self) -> bool:
        return self.container_count >= self.max_container_count

    # =========================================================================
    # MEMBERSHIP
    # =========================================================================

    def load_container(self, container: Container) -> None:
        """
        Bring a container aboard.

        The count limit is checked before the weight limit. Nothing is
        changed unless both pass.

        Raises:
            CapacityExceeded: If the ship already carries max_container_count
            OverloadExceeded: If the new total would exceed max_weight_mt
        """
        if self.is_full:
            raise CapacityExceeded(
                serial_number=container.serial_number,
                max_container_count=self.max_container_count,
            )

        total_weight = self.total_weight_kg + container.weight + container.load_mass
        if total_weight > self.max_weight_kg:
            raise OverloadExceeded(
                serial_number=container.serial_number,
                attempted_kg=total_weight,
                limit_kg=self.max_weight_kg,
            )

        self.containers.append(container)
        logger.info(
            f"Container {container.serial_number} loaded onto {self.name or 'ship'} "
            f"({self.container_count}/{self.max_container_count}, {total_weight:.1f} kg)"
        )

    def load_containers(self, containers: Iterable[Container]) -> None:
        """
        Bring several containers aboard in order.

        Stops at the first rejection; containers boarded before it stay aboard.
        """
        for container in containers:
            self.load_container(container)

    def unload_container(self, serial_number: str) -> Container:
        """
        Take a container off the ship and return it.

        Only ship membership changes; the container keeps its cargo.

        Raises:
            ContainerNotFound: If no container with serial_number is aboard
        """
        container = self.get_container(serial_number)
        self.containers.remove(container)
        logger.info(f"Container {serial_number} unloaded from {self.name or 'ship'}")
        return container

    def get_container(self, serial_number: str) -> Container:
        """Get the first container aboard with the given serial number."""
        for container in self.containers:
            if container.serial_number == serial_number:
                return container
        raise ContainerNotFound(serial_number)

    def has_container(self, serial_number: str) -> bool:
        return any(c.serial_number == serial_number for c in self.containers)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ship and its containers."""
        return {
            "name": self.name,
            "max_speed_kts": self.max_speed_kts,
            "max_container_count": self.max_container_count,
            "max_weight_mt": self.max_weight_mt,
            "container_count": self.container_count,
            "total_weight_kg": round(self.total_weight_kg, 3),
            "remaining_weight_kg": round(self.remaining_weight_kg, 3),
            "containers": [c.to_dict() for c in self.containers],
        }
