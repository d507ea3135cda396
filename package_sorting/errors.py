"""
Exceptions raised by the rule engine and its configuration.

All errors are terminal: nothing in the package retries or recovers from
them. Each kind also derives from the closest builtin so callers that
already catch ValueError / TypeError / LookupError keep working.
"""


class RuleEngineError(Exception):
    """Base class for all rule engine failures."""


class ConfigError(RuleEngineError, ValueError):
    """Raised when a rule, rule set or settings value is malformed."""


class InputError(RuleEngineError, TypeError):
    """Raised when a record passed to evaluate() is not a mapping."""


class RuleExecutionError(RuleEngineError):
    """Raised when a rule condition itself fails during evaluation."""

    def __init__(self, rule_name: str, cause: BaseException):
        self.rule_name = rule_name
        self.cause = cause
        super().__init__(f'error evaluating rule "{rule_name}": {cause}')


class NoMatchError(RuleEngineError, LookupError):
    """Raised when no rule condition holds for a record."""
