"""Render an Architecture as a Graphviz DOT digraph.

Components are grouped into one cluster per layer. The output is plain
text; rendering it to an image is left to the ``dot`` tool.
"""

from pathlib import Path

from ..architecture.models import Architecture, Component, ComponentKind
from .palette import EDGE_COLOR, KIND_COLORS

CLUSTER_LABELS = (
    (ComponentKind.HANDLER, "Handlers"),
    (ComponentKind.SERVICE, "Services"),
    (ComponentKind.REPOSITORY, "Repositories"),
    (ComponentKind.ADAPTER, "Adapters"),
)

GRAPH_LABEL = "Service Architecture"


def sanitize_name(name: str) -> str:
    return name.replace("-", "_")


def _node_line(component: Component) -> str:
    return (
        f'    "{sanitize_name(component.name)}" [shape=box, style=filled, '
        f'fillcolor="{KIND_COLORS[component.kind]}", '
        f'label="{component.name}\\n({component.package})"];'
    )


def generate_dot(architecture: Architecture) -> str:
    """Build the DOT source for an architecture.

    Args:
        architecture: Analysis result

    Returns:
        DOT text for a top-to-bottom digraph
    """
    lines = [
        "digraph Architecture {",
        "  rankdir=TB;",
        f'  label="{GRAPH_LABEL}";',
        "  labelloc=t;",
        "  fontsize=20;",
        "  pad=0.5;",
        "  nodesep=0.5;",
        "  ranksep=1.0;",
        "",
    ]

    for kind, label in CLUSTER_LABELS:
        members = architecture.components_of(kind)
        if not members:
            continue
        lines.append(f"  subgraph cluster_{kind.value} {{")
        lines.append(f'    label="{label}";')
        lines.append("    style=rounded;")
        lines.append('    bgcolor="#F5F5F5";')
        lines.append("")
        lines.extend(_node_line(component) for component in members)
        lines.append("  }")
        lines.append("")

    for component in architecture.components:
        source = sanitize_name(component.name)
        for dep in component.dependencies:
            lines.append(f'  "{source}" -> "{sanitize_name(dep)}" [color="{EDGE_COLOR}"];')

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(architecture: Architecture, output_path: Path) -> str:
    """Write the DOT source to ``output_path`` and return its absolute path."""
    out = Path(output_path).resolve()
    out.write_text(generate_dot(architecture), encoding="utf-8")
    return str(out)
