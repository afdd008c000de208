"""
manifest/builder.py - Build ships and containers from a manifest

Turns validated manifest entries into Container and Ship objects and
boards the containers. A container that fails to load or board is
recorded as rejected and the remaining entries are still processed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json
import logging

from pydantic import ValidationError

from ..containers.models import (
    Container,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from ..errors import ContainershipError, ManifestError
from ..ship.models import Ship
from .schemas import (
    BaseContainerSpec,
    GasContainerSpec,
    LiquidContainerSpec,
    Manifest,
    RefrigeratedContainerSpec,
    ShipSpec,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULTS
# =============================================================================

@dataclass
class Rejection:
    """A manifest entry that could not be loaded or boarded."""
    index: int
    serial_number: Optional[str]
    error: ContainershipError

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "serial_number": self.serial_number,
            **self.error.to_dict(),
        }


@dataclass
class ManifestResult:
    """Outcome of applying a manifest."""
    ship: Ship
    boarded: List[Container] = field(default_factory=list)
    rejected: List[Rejection] = field(default_factory=list)

    @property
    def all_boarded(self) -> bool:
        return not self.rejected

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ship": self.ship.to_dict(),
            "boarded": [c.serial_number for c in self.boarded],
            "rejected": [r.to_dict() for r in self.rejected],
        }


# =============================================================================
# BUILDERS
# =============================================================================

def build_container(spec: BaseContainerSpec) -> Container:
    """Create an empty container from its manifest entry."""
    common = dict(
        height=spec.height,
        weight=spec.weight,
        depth=spec.depth,
        max_load=spec.max_load,
        serial_number=spec.serial_number,
    )

    if isinstance(spec, LiquidContainerSpec):
        return LiquidContainer(is_hazardous=spec.is_hazardous, **common)
    if isinstance(spec, GasContainerSpec):
        return GasContainer(pressure=spec.pressure, **common)
    if isinstance(spec, RefrigeratedContainerSpec):
        return RefrigeratedContainer(
            product_type=spec.product_type,
            temperature=spec.temperature,
            **common,
        )
    raise TypeError(f"Unsupported container spec: {type(spec).__name__}")


def build_ship(spec: ShipSpec) -> Ship:
    return Ship(
        max_speed_kts=spec.max_speed_kts,
        max_container_count=spec.max_container_count,
        max_weight_mt=spec.max_weight_mt,
        name=spec.name,
    )


def apply_manifest(manifest: Manifest) -> ManifestResult:
    """
    Build the ship and bring every manifest container aboard.

    Each container is created, loaded with its load_mass (if given) and
    then boarded. Rule violations are logged and collected in
    ManifestResult.rejected instead of aborting the run.
    """
    result = ManifestResult(ship=build_ship(manifest.ship))

    for index, spec in enumerate(manifest.containers):
        container = build_container(spec)
        try:
            if spec.load_mass is not None:
                container.load(spec.load_mass)
            result.ship.load_container(container)
        except ContainershipError as e:
            logger.warning(f"Rejected container {container.serial_number}: {e}")
            result.rejected.append(Rejection(
                index=index,
                serial_number=container.serial_number,
                error=e,
            ))
            continue
        result.boarded.append(container)

    logger.info(
        f"Manifest applied: {len(result.boarded)} boarded, "
        f"{len(result.rejected)} rejected"
    )
    return result


# =============================================================================
# LOADING
# =============================================================================

def parse_manifest(data: Dict[str, Any]) -> Manifest:
    """
    Validate a manifest mapping.

    Raises:
        ManifestError: If the data does not match the manifest schema
    """
    try:
        return Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest: {e}") from e


def load_manifest(filepath: Union[str, Path]) -> Manifest:
    """
    Read and validate a JSON manifest file.

    Raises:
        ManifestError: If the file cannot be read, is not UTF-8 JSON, or does
            not match the manifest schema
    """
    path = Path(filepath)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Manifest {path} is not valid JSON: {e}", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise ManifestError(f"Manifest {path} is not valid UTF-8: {e}", path=str(path)) from e

    try:
        manifest = parse_manifest(data)
    except ManifestError as e:
        e.path = str(path)
        raise

    logger.debug(f"Loaded manifest {path} with {len(manifest.containers)} containers")
    return manifest
