# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the ship and fleet model.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from duel.ship import STANDARD_FLEET, Orientation, Ship, ShipSpec, expand_fleet


class TestShip:
    """Tests for Ship class."""

    def test_ship_creation(self):
        """Test creating a ship."""
        ship = Ship(name="TestShip", size=3)
        assert ship.name == "TestShip"
        assert ship.size == 3
        assert ship.positions == []
        assert ship.hit_count == 0
        assert not ship.is_sunk

    def test_ship_sinks_after_size_hits(self):
        """Test that a ship is sunk after exactly `size` hits."""
        ship = Ship(name="TestShip", size=2, positions=[(0, 0), (0, 1)])

        ship.register_hit()
        assert ship.hit_count == 1
        assert not ship.is_sunk

        ship.register_hit()
        assert ship.is_sunk

    def test_hit_on_sunk_ship_rejected(self):
        """Test that extra hits on a sunk ship raise and do not change the count."""
        ship = Ship(name="TestShip", size=1, positions=[(4, 4)])
        ship.register_hit()

        with pytest.raises(ValueError, match="already sunk"):
            ship.register_hit()
        assert ship.hit_count == 1

    def test_occupies(self):
        """Test coordinate membership."""
        ship = Ship(name="TestShip", size=2, positions=[(0, 0), (0, 1)])
        assert ship.occupies(0, 1)
        assert not ship.occupies(1, 0)

    def test_orientation(self):
        """Test orientation derived from positions."""
        assert Ship("A", 2, [(0, 0), (0, 1)]).orientation is Orientation.HORIZONTAL
        assert Ship("B", 2, [(0, 0), (1, 0)]).orientation is Orientation.VERTICAL
        assert Ship("C", 1, [(5, 5)]).orientation is Orientation.HORIZONTAL


class TestShipSpec:
    """Tests for fleet specification entries."""

    def test_non_positive_size_rejected(self):
        """Test that zero or negative sizes are refused."""
        with pytest.raises(ValueError):
            ShipSpec(name="Ghost", size=0)
        with pytest.raises(ValueError):
            ShipSpec(name="Ghost", size=-2)

    def test_expand_fleet_keeps_order(self):
        """Test expanding (name, size, count) entries."""
        specs = expand_fleet([("A", 2, 2), ("B", 1, 1)])
        assert specs == [ShipSpec("A", 2), ShipSpec("A", 2), ShipSpec("B", 1)]


class TestStandardFleet:
    """Tests for standard fleet configuration."""

    def test_standard_fleet_count(self):
        """Test that the standard fleet has 10 ships."""
        assert len(STANDARD_FLEET) == 10

    def test_standard_fleet_total_cells(self):
        """Test total cells covered by ships."""
        assert sum(spec.size for spec in STANDARD_FLEET) == 20  # 4*1 + 3*2 + 2*3 + 1*4

    def test_standard_fleet_composition(self):
        """Test how many ships of each size there are."""
        sizes = [spec.size for spec in STANDARD_FLEET]
        assert sizes.count(1) == 4
        assert sizes.count(2) == 3
        assert sizes.count(3) == 2
        assert sizes.count(4) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
