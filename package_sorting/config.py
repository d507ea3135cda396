"""
Configuration for the package sorting system.

Holds the fixed classification constants (thresholds, stack labels and
rule priority tiers) and an optional YAML settings file that lets a
deployment override the thresholds used by the batch sorter.

The constants are the contract: `sort()` and the default rule set always
use them. Overrides only flow into code that is explicitly handed a
SortingConfig.
"""
import logging
import math
from dataclasses import dataclass, asdict
from numbers import Real
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError


logger = logging.getLogger(__name__)

# Classification thresholds
VOLUME_THRESHOLD = 1000000  # cm³
DIMENSION_THRESHOLD = 150  # cm
MASS_THRESHOLD = 20  # kg

# Stack labels
STANDARD = "STANDARD"
SPECIAL = "SPECIAL"
REJECTED = "REJECTED"

# Rule priority tiers (lower is evaluated first)
PRIORITY_HIGH = 1  # rejected packages (bulky and heavy)
PRIORITY_MEDIUM = 2  # special packages (bulky or heavy)
PRIORITY_LOW = 3  # standard packages (catch-all)


@dataclass(frozen=True)
class SortingConfig:
    """Threshold settings used when classifying packages in bulk."""
    volume_threshold: float = VOLUME_THRESHOLD
    dimension_threshold: float = DIMENSION_THRESHOLD
    mass_threshold: float = MASS_THRESHOLD

    def __post_init__(self):
        for key, value in asdict(self).items():
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigError(f"threshold {key} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise ConfigError(f"threshold {key} must be a non-negative finite number")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SortingConfig":
        """
        Build a config from a parsed settings mapping.

        Only the `thresholds` section is read. Missing keys keep their
        defaults; unknown keys are rejected so typos do not silently fall
        back to the defaults.
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("config root must be a mapping")

        thresholds = data.get("thresholds") or {}
        if not isinstance(thresholds, dict):
            raise ConfigError("config section 'thresholds' must be a mapping")

        known = {"volume", "dimension", "mass"}
        unknown = set(thresholds) - known
        if unknown:
            raise ConfigError(f"unknown threshold keys: {', '.join(sorted(unknown))}")

        overrides = {f"{key}_threshold": value for key, value in thresholds.items()}
        return cls(**overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "thresholds": {
                "volume": self.volume_threshold,
                "dimension": self.dimension_threshold,
                "mass": self.mass_threshold,
            }
        }


def load_config(config_path: Union[str, Path] = "config.yaml") -> SortingConfig:
    """
    Load sorting settings from a YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        SortingConfig with any threshold overrides applied

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file content is not a valid settings mapping
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {config_path}: {e}") from e

    config = SortingConfig.from_dict(data)
    logger.info(f"Loaded sorting config from {config_path}: {config.to_dict()['thresholds']}")
    return config
