"""
Test Configuration and Fixtures

Every test starts with fresh serial counters and no cached configuration.
"""

import pytest

from containership.bootstrap.config import reset_config
from containership.containers import (
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    SerialNumberGenerator,
    set_serial_generator,
)


@pytest.fixture(autouse=True)
def fresh_serials():
    """Deterministic serial numbers starting at 1 for every kind."""
    set_serial_generator(SerialNumberGenerator())
    reset_config()
    yield
    set_serial_generator(None)
    reset_config()


@pytest.fixture
def hazardous_liquid():
    """Hazardous liquid container, max load 1000 kg."""
    return LiquidContainer(height=250, weight=1000, depth=600, max_load=1000, is_hazardous=True)


@pytest.fixture
def safe_liquid():
    """Non-hazardous liquid container, max load 1000 kg."""
    return LiquidContainer(height=250, weight=1000, depth=600, max_load=1000, is_hazardous=False)


@pytest.fixture
def gas_container():
    """Gas container, max load 2000 kg."""
    return GasContainer(height=250, weight=1200, depth=600, max_load=2000, pressure=8.0)


@pytest.fixture
def banana_reefer():
    """Refrigerated container for bananas at the required 13.3 °C."""
    return RefrigeratedContainer(
        height=250, weight=1500, depth=600, max_load=1500,
        product_type="Bananas", temperature=13.3,
    )
