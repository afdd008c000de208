"""
core/ - Shared constants for the container and ship layers.
"""

from .constants import (
    MT_TO_KG,
    HAZARDOUS_FILL_RATIO,
    NON_HAZARDOUS_FILL_RATIO,
    GAS_RESIDUAL_FRACTION,
    PRODUCT_TEMPERATURES,
    DEFAULT_SERIAL_PREFIX,
)

__all__ = [
    "MT_TO_KG",
    "HAZARDOUS_FILL_RATIO",
    "NON_HAZARDOUS_FILL_RATIO",
    "GAS_RESIDUAL_FRACTION",
    "PRODUCT_TEMPERATURES",
    "DEFAULT_SERIAL_PREFIX",
]
