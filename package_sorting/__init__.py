"""
Package sorting.

Classifies physical packages into STANDARD, SPECIAL or REJECTED stacks
from their dimensions and mass, either directly with sort() or through a
configurable first-match RuleEngine.
"""
from .classification import is_bulky, is_heavy, sort
from .config import (
    DIMENSION_THRESHOLD,
    MASS_THRESHOLD,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    REJECTED,
    SPECIAL,
    STANDARD,
    VOLUME_THRESHOLD,
    SortingConfig,
    load_config,
)
from .decisioning import (
    CLASSIFICATION_RULES,
    ConfigError,
    InputError,
    NoMatchError,
    Rule,
    RuleEngine,
    RuleEngineError,
    RuleExecutionError,
    get_default_rules,
)
from .sorter import PackageSorter

__version__ = "2.0.0"

__all__ = [
    "is_bulky",
    "is_heavy",
    "sort",
    "VOLUME_THRESHOLD",
    "DIMENSION_THRESHOLD",
    "MASS_THRESHOLD",
    "STANDARD",
    "SPECIAL",
    "REJECTED",
    "PRIORITY_HIGH",
    "PRIORITY_MEDIUM",
    "PRIORITY_LOW",
    "SortingConfig",
    "load_config",
    "CLASSIFICATION_RULES",
    "Rule",
    "RuleEngine",
    "get_default_rules",
    "RuleEngineError",
    "ConfigError",
    "InputError",
    "RuleExecutionError",
    "NoMatchError",
    "PackageSorter",
]
