"""
Shared pytest fixtures for package sorting tests.

Provides a small rule set mirroring the default tiers, a baseline package
record, and ready-made engine and sorter instances.
"""
import pytest

from package_sorting.config import (
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    REJECTED,
    SPECIAL,
    STANDARD,
)
from package_sorting.decisioning import RuleEngine
from package_sorting.sorter import PackageSorter


@pytest.fixture
def valid_rules():
    """
    Three-tier rule set equivalent to the default rules, with test names.

    Returns:
        List of rule mappings (fresh per test)
    """
    return [
        {
            'name': 'test-rule-1',
            'condition': lambda pkg: pkg['bulky'] and pkg['heavy'],
            'result': REJECTED,
            'priority': PRIORITY_HIGH,
        },
        {
            'name': 'test-rule-2',
            'condition': lambda pkg: pkg['bulky'] or pkg['heavy'],
            'result': SPECIAL,
            'priority': PRIORITY_MEDIUM,
        },
        {
            'name': 'test-rule-3',
            'condition': lambda pkg: True,
            'result': STANDARD,
            'priority': PRIORITY_LOW,
        },
    ]


@pytest.fixture
def package_data():
    """Package record with volume at threshold and both flags cleared."""
    return {
        'width': 100,
        'height': 100,
        'length': 100,
        'mass': 15,
        'bulky': False,
        'heavy': False,
    }


@pytest.fixture
def engine(valid_rules):
    return RuleEngine(valid_rules)


@pytest.fixture
def sorter():
    """PackageSorter with default thresholds and default rules."""
    return PackageSorter()
