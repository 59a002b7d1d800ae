"""
Configuration for the variant persistence add-on.

All tunable parameters live here, not in code.
Defaults are mirrored in config/variant_persist_defaults.yaml.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Set, Union

import yaml

from world.variant_persist.config_node import ConfigNodeError, check_value


@dataclass
class VariantPersistConfig:
    """Complete add-on configuration."""
    # Name value of the SCENARIO section the add-on owns in a save file
    scenario_name: str = "VariantPersistScenario"
    # Value-name prefix marking one stored preference
    part_prefix: str = "part:"
    # Host scenes in which the editor session is live
    editor_scenes: Set[str] = field(default_factory=lambda: {"EDITOR"})
    log_prefix: str = "[VariantPersist]"
    debug: bool = False


_DEFAULT_CONFIG = VariantPersistConfig()

# Active configuration (can be replaced at runtime)
_active_config: VariantPersistConfig = _DEFAULT_CONFIG

_REQUIRED_FIELDS = ("scenario_name", "part_prefix", "editor_scenes")

# Values the host keeps in every SCENARIO section
RESERVED_VALUE_NAMES = ("name", "scene")


def get_config() -> VariantPersistConfig:
    """Get the active add-on configuration."""
    return _active_config


def set_config(config: VariantPersistConfig) -> None:
    """Set the active add-on configuration."""
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Reset to default configuration."""
    global _active_config
    _active_config = _DEFAULT_CONFIG


# =============================================================================
# YAML LOADING
# =============================================================================

def _require(data: Dict[str, Any], key: str) -> Any:
    if key not in data or data[key] is None:
        raise ValueError(f"Missing required field: {key}")
    return data[key]


def load_config_from_yaml(path: Union[str, Path]) -> VariantPersistConfig:
    """
    Load add-on configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        VariantPersistConfig built from the file

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or a required field is missing
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a dictionary, got {type(data).__name__}")

    for key in _REQUIRED_FIELDS:
        _require(data, key)

    part_prefix = str(data["part_prefix"])
    if not part_prefix:
        raise ValueError("part_prefix must not be empty")
    for reserved in RESERVED_VALUE_NAMES:
        if reserved.startswith(part_prefix):
            raise ValueError(
                f"part_prefix '{part_prefix}' would match the section's '{reserved}' value"
            )
    try:
        check_value(part_prefix, "")
    except ConfigNodeError as e:
        raise ValueError(f"Invalid part_prefix: {e}") from e

    scenes = data["editor_scenes"]
    if isinstance(scenes, str):
        scenes = [scenes]
    elif not isinstance(scenes, list):
        raise ValueError(
            f"editor_scenes must be a list or a string, got {type(scenes).__name__}"
        )

    return VariantPersistConfig(
        scenario_name=str(data["scenario_name"]),
        part_prefix=part_prefix,
        editor_scenes={str(scene) for scene in scenes},
        log_prefix=str(data.get("log_prefix", _DEFAULT_CONFIG.log_prefix)),
        debug=bool(data.get("debug", False)),
    )
