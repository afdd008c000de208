"""
Unit tests for the Ship aggregate.

Tests boarding limits, disembarking by serial number and derived values.
"""

import pytest

from containership.containers import GasContainer, LiquidContainer
from containership.errors import (
    CapacityExceeded,
    ContainerNotFound,
    OverloadExceeded,
    ShipError,
)
from containership.ship import Ship


def make_gas(weight=1000.0, load=0.0, serial_number=None):
    container = GasContainer(
        height=250, weight=weight, depth=600, max_load=5000,
        serial_number=serial_number,
    )
    if load:
        container.load(load)
    return container


@pytest.fixture
def small_ship():
    """Ship with two slots and a 3 MT limit."""
    return Ship(max_speed_kts=20, max_container_count=2, max_weight_mt=3, name="Small")


class TestShipLoading:
    """Tests for load_container."""

    def test_load_two_containers(self, small_ship):
        """Test two containers within both limits are accepted."""
        small_ship.load_container(make_gas(weight=1000, load=400))
        small_ship.load_container(make_gas(weight=1000, load=600))
        assert small_ship.container_count == 2
        assert small_ship.total_weight_kg == pytest.approx(3000)

    def test_third_container_exceeds_capacity(self, small_ship):
        """Test a third container fails on count regardless of weight."""
        small_ship.load_container(make_gas(weight=100))
        small_ship.load_container(make_gas(weight=100))
        with pytest.raises(CapacityExceeded, match="full"):
            small_ship.load_container(make_gas(weight=1))
        assert small_ship.container_count == 2

    def test_count_checked_before_weight(self, small_ship):
        """Test a full ship reports capacity even for an overweight container."""
        small_ship.load_container(make_gas(weight=100))
        small_ship.load_container(make_gas(weight=100))
        with pytest.raises(CapacityExceeded):
            small_ship.load_container(make_gas(weight=10000))

    def test_overload(self, small_ship):
        """Test a container pushing total mass over the limit is rejected."""
        small_ship.load_container(make_gas(weight=2000, load=500))
        heavy = make_gas(weight=400, load=101)
        with pytest.raises(OverloadExceeded) as exc_info:
            small_ship.load_container(heavy)
        assert exc_info.value.attempted_kg == pytest.approx(3001)
        assert exc_info.value.limit_kg == pytest.approx(3000)
        assert small_ship.container_count == 1
        assert not small_ship.has_container(heavy.serial_number)

    def test_overload_counts_cargo(self, small_ship):
        """Test cargo mass counts toward the limit, not just tare."""
        with pytest.raises(OverloadExceeded):
            small_ship.load_container(make_gas(weight=1000, load=2500))

    def test_limit_is_in_tonnes(self):
        """Test max_weight_mt is converted to kilograms."""
        ship = Ship(max_speed_kts=20, max_container_count=10, max_weight_mt=1.5)
        assert ship.max_weight_kg == pytest.approx(1500)
        ship.load_container(make_gas(weight=1500))
        with pytest.raises(OverloadExceeded):
            ship.load_container(make_gas(weight=1))

    def test_zero_capacity_ship(self):
        """Test a ship with no slots rejects everything."""
        ship = Ship(max_speed_kts=20, max_container_count=0, max_weight_mt=100)
        assert ship.is_full
        with pytest.raises(CapacityExceeded):
            ship.load_container(make_gas())

    def test_load_does_not_touch_container(self, small_ship):
        """Test boarding leaves the container's cargo alone."""
        container = make_gas(load=300)
        small_ship.load_container(container)
        assert container.load_mass == 300

    def test_load_containers_stops_at_first_failure(self, small_ship):
        """Test bulk loading keeps earlier containers when a later one fails."""
        containers = [make_gas(weight=100) for _ in range(3)]
        with pytest.raises(CapacityExceeded):
            small_ship.load_containers(containers)
        assert small_ship.containers == containers[:2]

    def test_ship_errors_share_base(self, small_ship):
        """Test ship failures can be caught as ShipError."""
        with pytest.raises(ShipError):
            small_ship.unload_container("missing")


class TestShipUnloading:
    """Tests for unload_container and lookup."""

    def test_unload_unknown_serial(self, small_ship):
        """Test an unknown serial raises and leaves membership unchanged."""
        container = make_gas()
        small_ship.load_container(container)
        with pytest.raises(ContainerNotFound, match="KON-X-9") as exc_info:
            small_ship.unload_container("KON-X-9")
        assert isinstance(exc_info.value, LookupError)
        assert small_ship.containers == [container]

    def test_unload_known_serial(self, small_ship):
        """Test unloading removes exactly that container."""
        first = make_gas()
        second = make_gas()
        small_ship.load_container(first)
        small_ship.load_container(second)

        removed = small_ship.unload_container(first.serial_number)

        assert removed is first
        assert small_ship.container_count == 1
        assert not small_ship.has_container(first.serial_number)
        assert small_ship.has_container(second.serial_number)

    def test_unload_keeps_cargo(self, small_ship):
        """Test taking a container off does not unload its cargo."""
        container = make_gas(load=700)
        small_ship.load_container(container)
        small_ship.unload_container(container.serial_number)
        assert container.load_mass == 700

    def test_unload_first_match_only(self, small_ship):
        """Test duplicate serials are removed one at a time."""
        first = make_gas(serial_number="DUP-1")
        second = make_gas(serial_number="DUP-1")
        small_ship.load_container(first)
        small_ship.load_container(second)

        assert small_ship.unload_container("DUP-1") is first
        assert small_ship.containers == [second]

    def test_container_can_reboard(self, small_ship):
        """Test a container taken off can be loaded again."""
        container = make_gas()
        small_ship.load_container(container)
        small_ship.unload_container(container.serial_number)
        small_ship.load_container(container)
        assert small_ship.containers == [container]

    def test_get_container(self, small_ship):
        """Test lookup by serial number."""
        container = make_gas()
        small_ship.load_container(container)
        assert small_ship.get_container(container.serial_number) is container
        with pytest.raises(ContainerNotFound):
            small_ship.get_container("missing")


class TestShipDerivedValues:
    """Tests for ship aggregates and serialization."""

    def test_remaining(self, small_ship):
        """Test remaining slots and weight."""
        small_ship.load_container(make_gas(weight=1000, load=250))
        assert small_ship.remaining_capacity == 1
        assert small_ship.remaining_weight_kg == pytest.approx(1750)
        assert not small_ship.is_full

    def test_reflects_later_cargo_changes(self, small_ship):
        """Test totals follow cargo changes made after boarding."""
        container = make_gas(weight=1000, load=1000)
        small_ship.load_container(container)
        container.unload()
        assert small_ship.total_weight_kg == pytest.approx(1050)

    def test_mixed_container_kinds(self, small_ship):
        """Test containers of different kinds share the same limits."""
        liquid = LiquidContainer(height=1, weight=500, depth=1, max_load=1000)
        liquid.load(900)
        small_ship.load_container(liquid)
        small_ship.load_container(make_gas(weight=500))
        assert small_ship.total_weight_kg == pytest.approx(1900)

    def test_to_dict(self, small_ship):
        """Test ship serialization."""
        small_ship.load_container(make_gas(weight=1000, load=200))
        d = small_ship.to_dict()
        assert d["name"] == "Small"
        assert d["container_count"] == 1
        assert d["total_weight_kg"] == 1200
        assert d["max_weight_mt"] == 3
        assert d["containers"][0]["kind"] == "gas"
