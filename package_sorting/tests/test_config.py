"""
Tests for threshold configuration and YAML loading.
"""
import math
from pathlib import Path

import pytest

from package_sorting.config import (
    DIMENSION_THRESHOLD,
    MASS_THRESHOLD,
    VOLUME_THRESHOLD,
    SortingConfig,
    load_config,
)
from package_sorting.errors import ConfigError


class TestSortingConfig:
    """Test SortingConfig."""

    def test_defaults_match_constants(self):
        config = SortingConfig()

        assert config.volume_threshold == VOLUME_THRESHOLD
        assert config.dimension_threshold == DIMENSION_THRESHOLD
        assert config.mass_threshold == MASS_THRESHOLD

    def test_from_dict_partial_override(self):
        config = SortingConfig.from_dict({'thresholds': {'mass': 30}})

        assert config.mass_threshold == 30
        assert config.volume_threshold == VOLUME_THRESHOLD

    @pytest.mark.parametrize("data", [None, {}, {'thresholds': None}])
    def test_from_dict_empty(self, data):
        assert SortingConfig.from_dict(data) == SortingConfig()

    def test_rejects_unknown_keys(self):
        with pytest.raises(ConfigError, match="unknown threshold keys: weight"):
            SortingConfig.from_dict({'thresholds': {'weight': 5}})

    @pytest.mark.parametrize("value", [-1, math.inf, math.nan, "20", None, True])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(ConfigError):
            SortingConfig(mass_threshold=value)

    def test_rejects_non_mapping_sections(self):
        with pytest.raises(ConfigError):
            SortingConfig.from_dict(['thresholds'])
        with pytest.raises(ConfigError):
            SortingConfig.from_dict({'thresholds': [1, 2]})

    def test_to_dict_round_trips(self):
        config = SortingConfig(volume_threshold=500, dimension_threshold=80, mass_threshold=15)
        assert SortingConfig.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Test load_config()."""

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("thresholds:\n  dimension: 120\n  mass: 25.5\n")

        config = load_config(path)

        assert config.dimension_threshold == 120
        assert config.mass_threshold == 25.5
        assert config.volume_threshold == VOLUME_THRESHOLD

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == SortingConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("thresholds: [unclosed\n")

        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(path)

    def test_shipped_config_matches_constants(self):
        """The sample config.yaml at the repo root restates the defaults."""
        path = Path(__file__).resolve().parents[2] / "config.yaml"
        assert load_config(path) == SortingConfig()
