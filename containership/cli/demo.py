"""
cli/demo.py - Illustrative loading scenario

Builds one container of each kind, exercises the fill rules, boards a
ship and takes a container off again, printing every rejection.
"""

from __future__ import annotations
from typing import Callable, List, TextIO
import sys

from ..containers import (
    Container,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from ..errors import ContainershipError
from ..ship import Ship


def _attempt(action: Callable[[], object], out: TextIO) -> bool:
    """Run action, printing the message of any rule violation."""
    try:
        action()
    except ContainershipError as e:
        print(f"  Error: {e}", file=out)
        return False
    return True


def run_demo(out: TextIO = None) -> Ship:
    """
    Run the demo scenario.

    Returns:
        The ship as it stands at the end of the scenario
    """
    out = out or sys.stdout

    print("\n--- Containers ---", file=out)
    liquid = LiquidContainer(height=250, weight=2000, depth=600, max_load=1000, is_hazardous=True)
    gas = GasContainer(height=250, weight=1500, depth=600, max_load=2000, pressure=10)
    reefer = RefrigeratedContainer(
        height=250, weight=2500, depth=600, max_load=1500,
        product_type="Bananas", temperature=13.3,
    )
    containers: List[Container] = [liquid, gas, reefer]
    for container in containers:
        print(f"  {container.serial_number}: {type(container).__name__}", file=out)

    print("\n--- Loading ---", file=out)
    _attempt(lambda: liquid.load(500), out)
    _attempt(lambda: liquid.load(501), out)
    _attempt(lambda: gas.load(1000), out)
    _attempt(lambda: reefer.load(1400), out)
    for container in containers:
        print(f"  {container.serial_number}: {container.load_mass} kg", file=out)

    print("\n--- Unloading gas ---", file=out)
    gas.unload()
    print(f"  {gas.serial_number}: {gas.load_mass} kg left", file=out)

    print("\n--- Ship ---", file=out)
    ship = Ship(max_speed_kts=25, max_container_count=2, max_weight_mt=10, name="Demo")
    for container in containers:
        if _attempt(lambda: ship.load_container(container), out):
            print(f"  Boarded {container.serial_number}", file=out)

    _attempt(lambda: ship.unload_container("KON-X-0"), out)
    removed = ship.unload_container(liquid.serial_number)
    print(f"  Disembarked {removed.serial_number} ({removed.load_mass} kg aboard it)", file=out)
    print(
        f"  {ship.container_count}/{ship.max_container_count} containers, "
        f"{ship.total_weight_kg:.1f} kg / {ship.max_weight_kg:.1f} kg",
        file=out,
    )

    print("\n--- Hazard ---", file=out)
    liquid.notify_hazard("Leak detected")

    return ship
