"""Plain-text summary of an analysis run."""

from typing import Optional

from ..architecture.models import Architecture, ComponentKind
from ..visualization.report import ReportConfig

SUMMARY_LABELS = (
    (ComponentKind.HANDLER, "Handlers (Transport)"),
    (ComponentKind.SERVICE, "Services (Business Logic)"),
    (ComponentKind.ADAPTER, "Adapters (External)"),
    (ComponentKind.REPOSITORY, "Repositories (Data)"),
)


def build_summary(
    architecture: Architecture,
    output_path: str,
    report: Optional[ReportConfig] = None,
) -> str:
    """Describe what was generated and what was found.

    Args:
        architecture: Analysis result
        output_path: Where the output was written
        report: HTML report settings; theme and widgets are listed when given

    Returns:
        Multi-line summary text
    """
    lines = ["Architecture report generated!", "", f"Output: {output_path}"]
    if report is not None:
        lines.append(f"Theme: {report.theme}")

    lines.extend(["", "Components found:"])
    counts = architecture.counts_by_kind()
    for kind, label in SUMMARY_LABELS:
        count = counts.get(kind, 0)
        if count > 0:
            lines.append(f"  - {label}: {count}")

    dep_count = architecture.dependency_count()
    if dep_count > 0:
        lines.extend(["", f"Dependencies: {dep_count} connections"])

    if report is not None:
        lines.extend(["", "Included visualizations:"])
        lines.extend(f"  - {widget.value}" for widget in report.widgets)

    return "\n".join(lines) + "\n"
