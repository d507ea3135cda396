"""
Package decisioning layer.

Provides deterministic, first-match classification of package records
using a priority-ordered rule list.
"""
from ..errors import (
    ConfigError,
    InputError,
    NoMatchError,
    RuleEngineError,
    RuleExecutionError,
)
from .rules import Rule, CLASSIFICATION_RULES, get_default_rules, validate_rule
from .rule_engine import RuleEngine


__all__ = [
    'Rule',
    'RuleEngine',
    'CLASSIFICATION_RULES',
    'get_default_rules',
    'validate_rule',
    'RuleEngineError',
    'ConfigError',
    'InputError',
    'RuleExecutionError',
    'NoMatchError',
]
