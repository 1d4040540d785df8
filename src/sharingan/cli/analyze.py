"""Architecture analysis command."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..architecture import analyze as analyze_repository
from ..exceptions import SharinganError
from ..formatters import build_summary, get_formatter, write_json
from ..logging_config import get_logger, setup_logging
from ..visualization import ReportConfig, generate_html, parse_widgets, write_dot
from ..visualization.report import THEMES
from . import app
from ._common import console, resolve_config

OUTPUT_EXTENSIONS = {
    "html": ".html",
    "dot": ".dot",
    "json": ".json",
}

FORMATS = (*OUTPUT_EXTENSIONS, "rich")

logger = get_logger(__name__)


@app.command()
def analyze(
    repo_path: Path = typer.Argument(
        ...,
        help="Path to the Go service repository to analyze",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: <repo>/architecture.<ext>)",
    ),
    fmt: str = typer.Option(
        "html",
        "--format",
        "-f",
        help="Output format: html (interactive report), dot, json, or rich (terminal table)",
    ),
    title: Optional[str] = typer.Option(None, "--title", help="Report title"),
    description: Optional[str] = typer.Option(
        None, "--description", help="Description shown below the title"
    ),
    theme: Optional[str] = typer.Option(None, "--theme", help="Color theme: dark or light"),
    widgets: Optional[str] = typer.Option(
        None,
        "--widgets",
        help=(
            "Comma-separated widgets: stats_cards, architecture_graph, components_pie, "
            "dependencies_bar, layer_flow, dependency_matrix, components_table, package_tree"
        ),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress logging"),
):
    """
    Analyze a Go repository and render its architecture.

    [bold cyan]Examples:[/bold cyan]

      sharingan analyze /path/to/service

      sharingan analyze . --theme light --widgets stats_cards,architecture_graph

      sharingan analyze . --format dot -o arch.dot
    """
    if fmt not in FORMATS:
        console.print(
            f"[red]Error:[/red] unknown format {escape(repr(fmt))} (choose from {', '.join(FORMATS)})"
        )
        raise typer.Exit(1)

    if not repo_path.exists():
        console.print(f"[red]Error:[/red] repository path does not exist: {escape(str(repo_path))}")
        raise typer.Exit(1)

    report = ReportConfig()
    if title:
        report.title = title
    if description:
        report.description = description
    if theme in THEMES:
        report.theme = theme
    if widgets:
        report.widgets = parse_widgets(widgets)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        setup_logging(settings.verbosity)
        architecture = analyze_repository(repo_path, settings)

        if architecture.is_empty:
            console.print("[red]Error:[/red] no architectural components found in the repository")
            raise typer.Exit(1)

        if fmt == "rich":
            get_formatter("rich").render(architecture)
            return

        output_path = output or repo_path / f"architecture{OUTPUT_EXTENSIONS[fmt]}"
        if fmt == "html":
            written = generate_html(architecture, output_path, report)
            console.print(build_summary(architecture, written, report), markup=False)
        elif fmt == "dot":
            written = write_dot(architecture, output_path)
            console.print(build_summary(architecture, written), markup=False)
        else:
            written = write_json(architecture, output_path)
            console.print(build_summary(architecture, written), markup=False)

    except typer.Exit:
        raise
    except SharinganError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except OSError as e:
        logger.exception("Failed to write output")
        console.print(f"[red]Error:[/red] failed to write output: {escape(str(e))}")
        raise typer.Exit(1)
