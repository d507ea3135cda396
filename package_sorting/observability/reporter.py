"""
Render sorting run metrics as a Markdown report.

Sections: run header, summary counts, stack distribution, rules fired
and errors. Tables use tabulate's GitHub format.
"""
from tabulate import tabulate

from .metrics import SortingMetrics


class SortingReporter:
    """Generates Markdown reports from SortingMetrics."""

    def generate_report(self, metrics: SortingMetrics) -> str:
        lines = []

        lines.append("# Sorting Run Report")
        lines.append(f"**Run ID:** {metrics.run_id}")
        lines.append(f"**Started:** {metrics.started_at.isoformat()}")
        if metrics.completed_at:
            duration = (metrics.completed_at - metrics.started_at).total_seconds()
            lines.append(f"**Duration:** {duration:.1f} seconds")
        lines.append("")

        lines.append("## Summary")
        summary_data = [
            ["Total Packages", metrics.packages_total],
            ["Classified", metrics.packages_classified],
            ["Errors", metrics.errors],
        ]
        lines.append(tabulate(summary_data, headers=["Metric", "Value"], tablefmt="github"))
        lines.append("")

        if metrics.label_counts:
            lines.append("## Stack Distribution")
            label_data = [[k, v] for k, v in sorted(metrics.label_counts.items())]
            lines.append(tabulate(label_data, headers=["Stack", "Count"], tablefmt="github"))
            lines.append("")

        if metrics.rules_fired:
            lines.append("## Rules Fired")
            rules_data = [[k, v] for k, v in sorted(metrics.rules_fired.items())]
            lines.append(tabulate(rules_data, headers=["Rule", "Count"], tablefmt="github"))
            lines.append("")

        if metrics.error_details:
            lines.append("## Errors")
            error_data = [
                [detail["context"].get("index", ""), detail["message"]]
                for detail in metrics.error_details
            ]
            lines.append(tabulate(error_data, headers=["Package", "Error"], tablefmt="github"))
            lines.append("")

        return "\n".join(lines)
