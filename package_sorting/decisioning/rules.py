"""
Rule definitions for package classification.

A rule is a named, prioritized predicate paired with the label it produces.
Rules are plain data: the engine never knows what a condition inspects.
The default rule set below expresses the bulky/heavy decision matrix in
this form so it can be extended or reordered without touching the engine.
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Dict, List, Mapping, Union

from ..config import (
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    REJECTED,
    SPECIAL,
    STANDARD,
)
from ..errors import ConfigError


Condition = Callable[[Mapping[str, Any]], bool]

REQUIRED_PROPERTIES = ('name', 'condition', 'result', 'priority')


def _is_non_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_valid_priority(value: Any) -> bool:
    if isinstance(value, Decimal):
        # math.isfinite cannot convert signaling NaNs
        return value.is_finite() and value >= 0
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value >= 0


@dataclass(frozen=True)
class Rule:
    """
    One validated classification branch.

    priority accepts any real number (int, float, Fraction) or a Decimal;
    bool is rejected.
    """
    name: str
    condition: Condition
    result: str
    priority: float

    def __post_init__(self):
        if not _is_non_blank(self.name):
            raise ConfigError("rule name must be a non-empty string")
        if not callable(self.condition):
            raise ConfigError("rule condition must be a function")
        if not _is_non_blank(self.result):
            raise ConfigError("rule result must be a non-empty string")
        if not _is_valid_priority(self.priority):
            raise ConfigError("rule priority must be a non-negative number")

    def matches(self, record: Mapping[str, Any]) -> bool:
        return bool(self.condition(record))


RuleLike = Union[Rule, Mapping[str, Any]]


def validate_rule(rule: Any) -> Rule:
    """
    Validate a rule definition and return it as an immutable Rule.

    Accepts either a Rule instance or a mapping with the keys
    name, condition, result and priority.

    Raises:
        ConfigError: Naming the first problem found
    """
    if isinstance(rule, Rule):
        return rule

    if not isinstance(rule, Mapping):
        raise ConfigError("rule must be an object")

    for prop in REQUIRED_PROPERTIES:
        if prop not in rule:
            raise ConfigError(f"rule is missing required property: {prop}")

    return Rule(
        name=rule['name'],
        condition=rule['condition'],
        result=rule['result'],
        priority=rule['priority'],
    )


def bulky_and_heavy(record: Mapping[str, Any]) -> bool:
    return bool(record.get('bulky')) and bool(record.get('heavy'))


def bulky_or_heavy(record: Mapping[str, Any]) -> bool:
    return bool(record.get('bulky')) or bool(record.get('heavy'))


def always(record: Mapping[str, Any]) -> bool:
    """Catch-all condition."""
    return True


CLASSIFICATION_RULES = (
    {
        'name': 'rejected-packages',
        'condition': bulky_and_heavy,
        'result': REJECTED,
        'priority': PRIORITY_HIGH,
    },
    {
        'name': 'special-packages',
        'condition': bulky_or_heavy,
        'result': SPECIAL,
        'priority': PRIORITY_MEDIUM,
    },
    {
        'name': 'standard-packages',
        'condition': always,
        'result': STANDARD,
        'priority': PRIORITY_LOW,
    },
)


def get_default_rules() -> List[Dict[str, Any]]:
    """
    Get the default rule set in priority order.

    Returns fresh dicts on every call so callers can append their own rules
    (or edit copies) without touching CLASSIFICATION_RULES.

    To add a rule, give it a priority between the existing tiers, e.g.
    priority 0 to run before "rejected-packages" or 2.5 to run between
    "special-packages" and the catch-all.
    """
    return [dict(rule) for rule in CLASSIFICATION_RULES]
