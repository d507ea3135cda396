"""
Metrics collection for sorting runs.

SortingMetrics tracks one batch classification:
- How many packages were seen and classified
- How many landed in each stack
- Which rules fired and how often
- Errors raised while classifying
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from collections import defaultdict


@dataclass
class SortingMetrics:
    """
    Metrics for a single sorting run.

    Serializable with to_dict() for logging or reporting.
    """
    run_id: str
    started_at: datetime
    completed_at: Optional[datetime] = None

    packages_total: int = 0
    packages_classified: int = 0
    errors: int = 0

    # Key: stack label, Value: count
    label_counts: Dict[str, int] = field(default_factory=lambda: defaultdict(int))

    # Key: rule name, Value: count
    rules_fired: Dict[str, int] = field(default_factory=lambda: defaultdict(int))

    error_details: List[Dict[str, Any]] = field(default_factory=list)

    def record_classification(self, label: str, rule_name: Optional[str] = None):
        """
        Record a successfully classified package.

        Args:
            label: Stack label returned by the engine
            rule_name: Name of the rule that matched, if known
        """
        self.packages_classified += 1
        self.label_counts[label] += 1
        if rule_name:
            self.rules_fired[rule_name] += 1

    def record_error(self, error: str, context: Optional[Dict[str, Any]] = None):
        self.errors += 1
        self.error_details.append({
            "message": error,
            "context": context or {}
        })

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to a plain dict; defaultdicts become dicts."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "packages_total": self.packages_total,
            "packages_classified": self.packages_classified,
            "errors": self.errors,
            "label_counts": dict(self.label_counts),
            "rules_fired": dict(self.rules_fired),
            "error_details": self.error_details
        }
