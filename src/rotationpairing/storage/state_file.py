"""JSON save files for a rotation (roster, ledger and confirmed rounds)."""

# Rotation Pairing
# Copyright (C) 2026  Rotation Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from pathlib import Path
from typing import Any, Dict, Union

from rotationpairing.controllers.rotation_manager import RotationManager
from rotationpairing.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidConfigurationException,
)
from rotationpairing.models.rotation_config import RotationConfig
from rotationpairing.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def _read_json(path: PathLike) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FileLoadException(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise FileLoadException(f"{path} must contain a JSON object")
    return data


def load_rotation(path: PathLike) -> RotationManager:
    """Load a rotation saved with :func:`save_rotation`."""
    data = _read_json(path)
    try:
        rotation = RotationManager.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise FileLoadException(f"{path} is not a valid rotation file: {e}") from e
    logger.info(
        f"Loaded rotation with {len(rotation.roster)} people and "
        f"{rotation.current_round_number} rounds from {path}"
    )
    return rotation


def save_rotation(path: PathLike, rotation: RotationManager) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(rotation.to_dict(), f, indent=4)
    except OSError as e:
        raise FileSaveException(f"Could not save rotation to {path}: {e}") from e
    logger.info(f"Rotation saved to {path}")


def load_config(path: PathLike) -> RotationConfig:
    """Load engine settings from a JSON file."""
    data = _read_json(path)
    try:
        return RotationConfig.from_dict(data)
    except InvalidConfigurationException as e:
        raise InvalidConfigurationException(f"{path}: {e}") from e
