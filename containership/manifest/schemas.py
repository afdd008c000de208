"""
manifest/schemas.py - Pydantic Manifest Models

Declarative description of a ship and the containers to bring aboard.
Containers are discriminated by their ``kind`` field.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# Container Schemas
# =============================================================================


class BaseContainerSpec(BaseModel):
    """Fields shared by every container kind."""

    serial_number: Optional[str] = Field(
        None, description="Explicit serial number; generated when omitted"
    )
    height: float = Field(..., ge=0, description="Height (cm)")
    weight: float = Field(..., ge=0, description="Tare weight (kg)")
    depth: float = Field(..., ge=0, description="Depth (cm)")
    max_load: float = Field(..., ge=0, description="Maximum cargo mass (kg)")
    load_mass: Optional[float] = Field(
        None, ge=0, description="Cargo mass to load before boarding (kg)"
    )


class LiquidContainerSpec(BaseContainerSpec):
    """Liquid container entry."""

    kind: Literal["liquid"] = "liquid"
    is_hazardous: bool = Field(default=False, description="Hazardous cargo")


class GasContainerSpec(BaseContainerSpec):
    """Gas container entry."""

    kind: Literal["gas"] = "gas"
    pressure: float = Field(default=0.0, ge=0, description="Pressure (atm)")


class RefrigeratedContainerSpec(BaseContainerSpec):
    """Refrigerated container entry."""

    kind: Literal["refrigerated"] = "refrigerated"
    product_type: str = Field(..., description="Product carried")
    temperature: float = Field(..., description="Set temperature (°C)")


ContainerSpec = Annotated[
    Union[LiquidContainerSpec, GasContainerSpec, RefrigeratedContainerSpec],
    Field(discriminator="kind"),
]


# =============================================================================
# Ship Schemas
# =============================================================================


class ShipSpec(BaseModel):
    """Ship entry."""

    name: str = Field(default="", description="Ship name")
    max_speed_kts: float = Field(..., ge=0, description="Maximum speed (knots)")
    max_container_count: int = Field(..., ge=0, description="Container slots")
    max_weight_mt: float = Field(..., ge=0, description="Weight limit (MT)")


class Manifest(BaseModel):
    """A ship and the containers to bring aboard, in boarding order."""

    ship: ShipSpec
    containers: List[ContainerSpec] = Field(default_factory=list)
