"""
manifest/ - Declarative ship and container construction

Pydantic schemas for JSON manifests and the builders that turn them into
a loaded Ship.
"""

from .schemas import (
    BaseContainerSpec,
    LiquidContainerSpec,
    GasContainerSpec,
    RefrigeratedContainerSpec,
    ContainerSpec,
    ShipSpec,
    Manifest,
)

from .builder import (
    Rejection,
    ManifestResult,
    build_container,
    build_ship,
    apply_manifest,
    parse_manifest,
    load_manifest,
)

__all__ = [
    # Schemas
    "BaseContainerSpec",
    "LiquidContainerSpec",
    "GasContainerSpec",
    "RefrigeratedContainerSpec",
    "ContainerSpec",
    "ShipSpec",
    "Manifest",
    # Builders
    "Rejection",
    "ManifestResult",
    "build_container",
    "build_ship",
    "apply_manifest",
    "parse_manifest",
    "load_manifest",
]
