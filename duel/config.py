# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Configuration loading.

Settings come from a YAML file merged over DEFAULT_CONFIG, so a file only
needs the keys it changes.
"""

import copy
import logging
from typing import Dict, List, Optional

import yaml

from .board import BOARD_SIZE
from .ship import ShipSpec


logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict = {
    "game": {
        "board_size": BOARD_SIZE,
        "fleet": [
            {"name": "Single-masted", "size": 1, "count": 4},
            {"name": "Two-masted", "size": 2, "count": 3},
            {"name": "Three-masted", "size": 3, "count": 2},
            {"name": "Four-masted", "size": 4, "count": 1},
        ],
    },
    "client": {
        "auto_place": False,
        "seed": None,
        "clear_lines": 30,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _merge(base: Dict, overrides: Dict) -> Dict:
    """Recursively merge `overrides` into `base` (in place)."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file, or None for the defaults.

    Returns:
        Configuration dictionary.

    Raises:
        ValueError: If the file does not contain a mapping.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        return config

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    logger.debug(f"Loaded config from {config_path}")
    return _merge(config, data)


def fleet_from_config(config: Dict) -> List[ShipSpec]:
    """
    Build the ordered fleet from the `game` section.

    Each entry is {name, size, count}; count defaults to 1.

    Raises:
        ValueError: If the board size or an entry is invalid, or a ship
            does not fit on the board.
    """
    board_size = config["game"]["board_size"]
    if not isinstance(board_size, int) or board_size <= 0:
        raise ValueError(f"Invalid board_size: {board_size!r} (must be a positive integer)")

    specs = []
    for entry in config["game"]["fleet"]:
        if not isinstance(entry, dict) or "name" not in entry or "size" not in entry:
            raise ValueError(f"Invalid fleet entry: {entry!r} (needs 'name' and 'size')")

        name = str(entry["name"])
        size = entry["size"]
        count = entry.get("count", 1)

        if not isinstance(size, int) or not isinstance(count, int) or count < 0:
            raise ValueError(f"Invalid fleet entry: {entry!r}")
        if size > board_size:
            raise ValueError(f"Ship {name} (size {size}) does not fit on a {board_size}x{board_size} board")

        specs.extend(ShipSpec(name=name, size=size) for _ in range(count))

    if not specs:
        raise ValueError("Fleet must contain at least one ship")

    return specs
