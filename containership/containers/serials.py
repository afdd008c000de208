"""
Serial number assignment for containers.

Serial numbers take the form ``KON-<code>-<n>`` where ``<code>`` is the
single-letter code of the container kind and ``<n>`` increases per code
for the lifetime of the generator.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Iterator, Optional
import itertools
import logging

from ..core.constants import DEFAULT_SERIAL_PREFIX

if TYPE_CHECKING:
    from .models import ContainerKind

logger = logging.getLogger(__name__)


class SerialNumberGenerator:
    """Hands out sequential serial numbers per container kind."""

    def __init__(self, prefix: str = DEFAULT_SERIAL_PREFIX):
        self.prefix = prefix
        self._counters: Dict[str, Iterator[int]] = {}

    def next(self, kind: "ContainerKind") -> str:
        counter = self._counters.setdefault(kind.code, itertools.count(1))
        return f"{self.prefix}-{kind.code}-{next(counter)}"

    def reset(self) -> None:
        self._counters.clear()


# Global generator instance
_generator: Optional[SerialNumberGenerator] = None


def get_serial_generator() -> SerialNumberGenerator:
    """Get the process-wide generator, creating it from config if needed."""
    global _generator
    if _generator is None:
        from ..bootstrap.config import get_config

        _generator = SerialNumberGenerator(get_config().serial.prefix)
        logger.debug(f"Serial number prefix: {_generator.prefix}")
    return _generator


def set_serial_generator(generator: Optional[SerialNumberGenerator]) -> None:
    """Replace the process-wide generator (None re-reads config on next use)."""
    global _generator
    _generator = generator


def next_serial_number(kind: "ContainerKind") -> str:
    return get_serial_generator().next(kind)
