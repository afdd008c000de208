"""
Hazard notification capability.

Only liquid and gas containers can raise hazard warnings. The capability
is never triggered by load/unload; external hazard-monitoring code calls
it when it detects a dangerous condition.
"""

from __future__ import annotations
from typing import Any
import logging

hazard_logger = logging.getLogger("containership.hazard")


class HazardNotifier:
    """Mixin for containers that can emit hazard notifications."""

    serial_number: str

    def notify_hazard(self, message: str) -> None:
        hazard_logger.warning(
            f"Hazard notification for container {self.serial_number}: {message}"
        )


def can_notify_hazard(container: Any) -> bool:
    """Check whether a container carries the hazard capability."""
    return isinstance(container, HazardNotifier)
