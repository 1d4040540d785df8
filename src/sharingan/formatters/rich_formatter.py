"""Rich terminal formatter for Sharingan."""

from rich.console import Console
from rich.table import Table

from ..architecture.models import LAYER_ORDER, Architecture
from .base import BaseFormatter

console = Console()

KIND_STYLES = {
    "handler": "blue",
    "service": "green",
    "repository": "yellow",
    "adapter": "magenta",
}


class RichFormatter(BaseFormatter):
    """Component table grouped by layer, followed by a dependency count."""

    def render(self, architecture: Architecture) -> None:
        console.print(self._build_table(architecture))
        console.print(
            f"  [bold]{len(architecture.components)}[/bold] components, "
            f"[bold]{architecture.dependency_count()}[/bold] dependencies"
        )

    def format(self, architecture: Architecture) -> str:
        # Rich output goes directly to console; return empty string
        self.render(architecture)
        return ""

    def _build_table(self, architecture: Architecture) -> Table:
        table = Table(title="Architecture Components", show_lines=False)
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Package", style="dim")
        table.add_column("File", style="dim")
        table.add_column("Dependencies")

        for kind in LAYER_ORDER:
            style = KIND_STYLES[kind.value]
            for component in architecture.components_of(kind):
                table.add_row(
                    component.name,
                    f"[{style}]{kind.value}[/{style}]",
                    component.package,
                    component.source_path,
                    ", ".join(component.dependencies) or "-",
                )
        return table
