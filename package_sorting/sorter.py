"""
Batch package sorter.

Coordinates a sorting run:
1. Derive the bulky/heavy flags for each package from the configured thresholds
2. Evaluate the enriched record against the rule engine
3. Record which stack and rule each package ended up in

The sorter owns its RuleEngine. Custom rules replace the default rule set
entirely; to extend the defaults pass get_default_rules() plus your own.
"""
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .classification import is_bulky, is_heavy
from .config import SortingConfig
from .decisioning import RuleEngine, get_default_rules
from .decisioning.rules import RuleLike
from .errors import InputError
from .observability import SortingMetrics


logger = logging.getLogger(__name__)

PACKAGE_FIELDS = ('width', 'height', 'length', 'mass')


class PackageSorter:
    """Classifies packages into handling stacks through a RuleEngine."""

    def __init__(
        self,
        config: Optional[SortingConfig] = None,
        rules: Optional[Sequence[RuleLike]] = None,
    ):
        """
        Args:
            config: Threshold settings. Defaults to the fixed constants.
            rules: Rules for the engine. Defaults to the default rule set.
        """
        self.config = config or SortingConfig()
        self.engine = RuleEngine(rules if rules is not None else get_default_rules())
        self.last_metrics: Optional[SortingMetrics] = None

    def build_record(self, package: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Copy a package mapping and add its derived bulky/heavy flags.

        Raises:
            InputError: If package is not a mapping or lacks a dimension or mass
        """
        if not isinstance(package, Mapping):
            raise InputError("package data must be an object")

        for key in PACKAGE_FIELDS:
            if key not in package:
                raise InputError(f"package is missing required field: {key}")

        record = dict(package)
        record['bulky'] = is_bulky(
            package['width'],
            package['height'],
            package['length'],
            dimension_threshold=self.config.dimension_threshold,
            volume_threshold=self.config.volume_threshold,
        )
        record['heavy'] = is_heavy(package['mass'], mass_threshold=self.config.mass_threshold)
        return record

    def classify(self, package: Mapping[str, Any]) -> str:
        """Return the stack label for one package."""
        return self.engine.evaluate(self.build_record(package))

    def classify_batch(
        self,
        packages: Iterable[Mapping[str, Any]],
        run_id: Optional[str] = None,
    ) -> Tuple[List[str], SortingMetrics]:
        """
        Classify packages in order and collect run metrics.

        The first failing package stops the run: the error is recorded in
        the metrics, logged, and re-raised. Metrics of the latest run, failed
        or not, stay available as last_metrics.

        Returns:
            Labels in input order, and the metrics for the run
        """
        packages = list(packages)
        run_id = run_id or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
        metrics = SortingMetrics(run_id=run_id, started_at=datetime.utcnow())
        metrics.packages_total = len(packages)
        self.last_metrics = metrics

        logger.info(f"Starting sorting run {run_id} with {len(packages)} packages")

        labels = []
        for index, package in enumerate(packages):
            try:
                outcome = self.engine.explain(self.build_record(package))
            except Exception as e:
                metrics.record_error(str(e), {"index": index})
                metrics.completed_at = datetime.utcnow()
                logger.error(f"Sorting run {run_id} failed at package {index}: {e}", exc_info=True)
                raise

            labels.append(outcome['result'])
            metrics.record_classification(outcome['result'], outcome['matched_rule'])

        metrics.completed_at = datetime.utcnow()
        logger.info(f"Sorting run {run_id} complete: {dict(metrics.label_counts)}")
        return labels, metrics
