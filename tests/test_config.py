# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for configuration loading.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from duel.config import DEFAULT_CONFIG, fleet_from_config, load_config
from duel.ship import STANDARD_FLEET, ShipSpec


REPO_CONFIG = Path(__file__).parent.parent / "configs" / "duel.yaml"


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test loading without a file."""
        config = load_config()
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_defaults_not_shared(self):
        """Test that callers cannot change the defaults."""
        config = load_config()
        config["game"]["fleet"].clear()
        assert DEFAULT_CONFIG["game"]["fleet"]

    def test_repo_config_matches_standard_fleet(self):
        """Test the shipped config file."""
        config = load_config(str(REPO_CONFIG))
        assert fleet_from_config(config) == STANDARD_FLEET
        assert config["game"]["board_size"] == 10

    def test_partial_file_merges(self, tmp_path):
        """Test that a file only overrides the keys it sets."""
        path = tmp_path / "small.yaml"
        path.write_text(
            "game:\n"
            "  board_size: 6\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = load_config(str(path))
        assert config["game"]["board_size"] == 6
        assert config["logging"]["level"] == "DEBUG"
        assert config["client"]["clear_lines"] == 30
        assert len(config["game"]["fleet"]) == 4

    def test_empty_file(self, tmp_path):
        """Test that an empty file yields the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_non_mapping_rejected(self, tmp_path):
        """Test that a YAML list is refused."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(str(path))


class TestFleetFromConfig:
    """Tests for fleet_from_config."""

    def test_default_fleet(self):
        """Test the default fleet composition."""
        assert fleet_from_config(load_config()) == STANDARD_FLEET

    def test_count_defaults_to_one(self):
        """Test entries without count."""
        config = load_config()
        config["game"]["fleet"] = [{"name": "Scout", "size": 1}, {"name": "Frigate", "size": 2, "count": 2}]

        assert fleet_from_config(config) == [
            ShipSpec("Scout", 1), ShipSpec("Frigate", 2), ShipSpec("Frigate", 2),
        ]

    @pytest.mark.parametrize("fleet", [
        [{"name": "NoSize"}],
        [{"size": 2}],
        ["Scout"],
        [{"name": "Zero", "size": 0}],
        [{"name": "Text", "size": "2"}],
        [{"name": "Negative", "size": 1, "count": -1}],
        [],
        [{"name": "None", "size": 1, "count": 0}],
    ])
    def test_invalid_fleet(self, fleet):
        """Test malformed fleet entries."""
        config = load_config()
        config["game"]["fleet"] = fleet
        with pytest.raises(ValueError):
            fleet_from_config(config)

    def test_ship_larger_than_board(self):
        """Test that every ship must fit on the board."""
        config = load_config()
        config["game"]["board_size"] = 3
        with pytest.raises(ValueError, match="does not fit"):
            fleet_from_config(config)

    def test_invalid_board_size(self):
        """Test board size validation."""
        config = load_config()
        config["game"]["board_size"] = 0
        with pytest.raises(ValueError, match="board_size"):
            fleet_from_config(config)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
