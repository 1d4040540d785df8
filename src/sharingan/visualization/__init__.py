"""Renderers: DOT diagram and interactive HTML report."""

from .dot import generate_dot, write_dot
from .report import (
    DEFAULT_WIDGETS,
    ReportConfig,
    Widget,
    build_report_data,
    generate_html,
    parse_widgets,
    render_html,
)

__all__ = [
    "DEFAULT_WIDGETS",
    "ReportConfig",
    "Widget",
    "build_report_data",
    "generate_dot",
    "generate_html",
    "parse_widgets",
    "render_html",
    "write_dot",
]
