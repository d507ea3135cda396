"""
Rule engine that evaluates package records against an ordered rule list.

The engine applies rules in priority order (lowest first) and returns the
label of the first rule whose condition holds. Rules with equal priority
keep the order in which they were supplied or added.

The engine is not synchronized. Concurrent evaluate() calls on an engine
that is never mutated are safe; mixing add_rule()/remove_rule() with other
calls across threads needs an external lock.
"""
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterable, List, Tuple
import logging

from ..errors import ConfigError, InputError, NoMatchError, RuleExecutionError
from .rules import Rule, RuleLike, validate_rule


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Deterministic first-match rule engine.

    Rules are evaluated in priority order (0 is highest priority).
    The first rule that matches determines the result.
    """

    def __init__(self, rules: Sequence[RuleLike]):
        """
        Initialize the rule engine.

        Args:
            rules: Non-empty sequence of Rule instances or rule mappings

        Raises:
            ConfigError: If the sequence is empty or any rule is invalid
        """
        if (
            not isinstance(rules, Sequence)
            or isinstance(rules, (str, bytes))
            or len(rules) == 0
        ):
            raise ConfigError("rules must be a non-empty structured sequence")

        validated = [validate_rule(rule) for rule in rules]

        seen = set()
        for rule in validated:
            if rule.name in seen:
                raise ConfigError(f'rule with name "{rule.name}" already exists')
            seen.add(rule.name)

        self._rules: List[Rule] = self._ordered(validated)
        logger.debug(f"Rule engine initialized with rules: {self.rule_names()}")

    @staticmethod
    def _ordered(rules: List[Rule]) -> List[Rule]:
        # sorted() is stable, so equal priorities keep arrival order
        return sorted(rules, key=lambda r: r.priority)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """Snapshot of the rules in evaluation order."""
        return tuple(self._rules)

    def rule_names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return any(rule.name == name for rule in self._rules)

    def __repr__(self) -> str:
        return f"RuleEngine(rules={self.rule_names()!r})"

    def _check_record(self, record: Any) -> None:
        if not isinstance(record, Mapping):
            raise InputError("package data must be an object")

    def _matches(self, rule: Rule, record: Mapping) -> bool:
        try:
            return rule.matches(record)
        except Exception as e:
            logger.warning(f"Condition of rule {rule.name} raised: {e}")
            raise RuleExecutionError(rule.name, e) from e

    def evaluate(self, record: Mapping[str, Any]) -> str:
        """
        Apply the rule chain to a record.

        Args:
            record: Package attributes plus any derived flags the
                conditions inspect (e.g. bulky, heavy)

        Returns:
            Result label of the first matching rule

        Raises:
            InputError: If record is not a mapping
            RuleExecutionError: If a condition raises; no later rule is tried
            NoMatchError: If no condition holds
        """
        self._check_record(record)

        for rule in self._rules:
            if self._matches(rule, record):
                logger.debug(f"Rule {rule.name} matched -> {rule.result}")
                return rule.result

        raise NoMatchError("no matching rule found for package data")

    def evaluate_batch(self, records: Iterable[Mapping[str, Any]]) -> List[str]:
        """
        Apply the rule chain to multiple records.

        The first failure propagates; there are no placeholder results.

        Returns:
            List of labels in the same order as the input
        """
        return [self.evaluate(record) for record in records]

    def explain(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Evaluate a record and report which rules were tried.

        Args:
            record: Same as for evaluate()

        Returns:
            Dictionary with the result, the matching rule name and an
            evaluation trace covering every rule up to the match

        Raises:
            Same errors as evaluate()
        """
        self._check_record(record)

        trace = []
        for rule in self._rules:
            matched = self._matches(rule, record)
            trace.append({
                'name': rule.name,
                'priority': rule.priority,
                'matched': matched,
            })
            if matched:
                return {
                    'result': rule.result,
                    'matched_rule': rule.name,
                    'evaluation_trace': trace,
                    'total_rules_evaluated': len(trace),
                }

        raise NoMatchError("no matching rule found for package data")

    def add_rule(self, rule: RuleLike) -> None:
        """
        Validate and insert a rule at its priority position.

        Raises:
            ConfigError: If the rule is invalid or its name is taken
        """
        validated = validate_rule(rule)
        if validated.name in self:
            raise ConfigError(f'rule with name "{validated.name}" already exists')

        self._rules = self._ordered(self._rules + [validated])
        logger.info(f"Added rule {validated.name} (priority {validated.priority})")

    def remove_rule(self, name: str) -> None:
        """
        Remove a rule by name. Remaining rules keep their order.

        Raises:
            ConfigError: If name is blank or no rule has that name
        """
        if not isinstance(name, str) or not name.strip():
            raise ConfigError("rule name must be a non-empty string")

        remaining = [rule for rule in self._rules if rule.name != name]
        if len(remaining) == len(self._rules):
            raise ConfigError(f'rule with name "{name}" not found')

        self._rules = remaining
        logger.info(f"Removed rule {name}")
