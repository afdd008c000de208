"""
Container and Ship Constants

Fill ratios, unit conversions and the refrigerated product table used
by the container and ship rules.
"""

from types import MappingProxyType
from typing import Mapping

# ==================== Unit Conversions ====================

# Ship weight limits are given in metric tonnes, container masses in kg
MT_TO_KG = 1000.0

# ==================== Liquid Containers ====================

HAZARDOUS_FILL_RATIO = 0.5
NON_HAZARDOUS_FILL_RATIO = 0.9

# ==================== Gas Containers ====================

# Fraction of the cargo left in a gas container after unloading
GAS_RESIDUAL_FRACTION = 0.05

# ==================== Refrigerated Containers ====================

# Minimum set temperature (°C) per product
PRODUCT_TEMPERATURES: Mapping[str, float] = MappingProxyType({
    "Bananas": 13.3,
    "Chocolate": 18.0,
    "Fish": 2.0,
    "Meat": -15.0,
    "Ice cream": -18.0,
    "Frozen pizza": -30.0,
    "Cheese": 7.2,
    "Sausages": 5.0,
    "Butter": 20.5,
    "Eggs": 19.0,
})

# ==================== Serial Numbers ====================

DEFAULT_SERIAL_PREFIX = "KON"
