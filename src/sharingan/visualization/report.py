"""Generate a self-contained interactive HTML architecture report.

The report embeds all data as a JSON blob inside a ``<script>`` tag and
draws its charts with ECharts, loaded from a CDN. Which widgets appear,
and in what order, is controlled by ``ReportConfig.widgets``.
"""

from __future__ import annotations

import html
import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

from ..architecture.models import LAYER_ORDER, Architecture
from .palette import KIND_CATEGORIES, KIND_COLORS, KIND_LABELS

ECHARTS_URL = "https://cdn.jsdelivr.net/npm/echarts@5.4.3/dist/echarts.min.js"

# Larger matrices are unreadable; the widget is dropped above this size
MATRIX_MAX_COMPONENTS = 20


class Widget(Enum):
    """Report sections, named as accepted by ``parse_widgets``."""

    STATS_CARDS = "stats_cards"
    ARCHITECTURE_GRAPH = "architecture_graph"
    COMPONENTS_PIE = "components_pie"
    DEPENDENCIES_BAR = "dependencies_bar"
    LAYER_FLOW = "layer_flow"
    DEPENDENCY_MATRIX = "dependency_matrix"
    COMPONENTS_TABLE = "components_table"
    PACKAGE_TREE = "package_tree"


DEFAULT_WIDGETS = (
    Widget.STATS_CARDS,
    Widget.ARCHITECTURE_GRAPH,
    Widget.COMPONENTS_PIE,
    Widget.DEPENDENCIES_BAR,
    Widget.LAYER_FLOW,
    Widget.DEPENDENCY_MATRIX,
    Widget.COMPONENTS_TABLE,
)

THEMES = ("dark", "light")


@dataclass
class ReportConfig:
    """What to include in the HTML report."""

    title: str = "Go Architecture Report"
    description: str = "Interactive architecture visualization"
    theme: str = "dark"
    widgets: List[Widget] = field(default_factory=lambda: list(DEFAULT_WIDGETS))


def parse_widgets(names: str) -> List[Widget]:
    """Parse a comma-separated widget list.

    Names are matched case-insensitively and unknown names are ignored.
    When nothing valid remains, the default widget list is returned.
    """
    by_name = {w.value: w for w in Widget}
    widgets = [
        by_name[name]
        for name in (part.strip().lower() for part in names.split(","))
        if name in by_name
    ]
    return widgets or list(DEFAULT_WIDGETS)


# ── Report data ──────────────────────────────────────────────────────


def build_report_data(architecture: Architecture) -> Dict[str, Any]:
    """Compute everything the report's charts and tables need."""
    components = [
        {
            "name": c.name,
            "type": c.kind.value,
            "package": c.package,
            "filePath": c.source_path,
            "dependencies": list(c.dependencies),
            "dependedBy": architecture.dependents_of(c.name),
            "color": KIND_COLORS[c.kind],
            "category": KIND_CATEGORIES[c.kind],
        }
        for c in architecture.components
    ]

    return {
        "components": components,
        "stats": _build_stats(architecture),
        "layers": _build_layers(architecture),
        "graph": _build_graph(components),
        "matrix": _build_matrix(components),
        "packages": _build_packages(architecture),
    }


def _build_stats(architecture: Architecture) -> Dict[str, Any]:
    by_type: Dict[str, int] = {}
    total_deps = 0
    max_deps = 0
    most_connected = ""

    for component in architecture.components:
        label = KIND_LABELS[component.kind]
        by_type[label] = by_type.get(label, 0) + 1
        count = len(component.dependencies)
        total_deps += count
        if count > max_deps:
            max_deps = count
            most_connected = component.name

    total = len(architecture.components)
    return {
        "totalComponents": total,
        "totalDependencies": total_deps,
        "componentsByType": by_type,
        "avgDependencies": total_deps / total if total else 0.0,
        "maxDependencies": max_deps,
        "mostConnected": most_connected,
        "packageCount": len(architecture.packages()),
    }


def _build_layers(architecture: Architecture) -> List[Dict[str, Any]]:
    layers = []
    for order, kind in enumerate(LAYER_ORDER):
        members = architecture.components_of(kind)
        if not members:
            continue
        layers.append(
            {
                "name": KIND_LABELS[kind],
                "color": KIND_COLORS[kind],
                "components": [c.name for c in members],
                "order": order,
            }
        )
    return layers


def _build_graph(components: List[Dict[str, Any]]) -> Dict[str, Any]:
    categories = sorted(KIND_CATEGORIES.items(), key=lambda item: item[1])
    return {
        "nodes": [
            {
                "id": c["name"],
                "name": c["name"],
                "category": c["category"],
                "value": len(c["dependencies"]) + len(c["dependedBy"]) + 1,
                "package": c["package"],
            }
            for c in components
        ],
        "links": [
            {"source": c["name"], "target": dep} for c in components for dep in c["dependencies"]
        ],
        "categories": [
            {"name": KIND_LABELS[kind], "color": KIND_COLORS[kind]} for kind, _ in categories
        ],
    }


def _build_matrix(components: List[Dict[str, Any]]) -> Dict[str, Any]:
    labels = [c["name"] for c in components]
    index = {name: i for i, name in enumerate(labels)}
    data = [[0] * len(labels) for _ in labels]
    for i, component in enumerate(components):
        for dep in component["dependencies"]:
            j = index.get(dep)
            if j is not None:
                data[i][j] = 1
    return {"labels": labels, "data": data}


def _build_packages(architecture: Architecture) -> List[Dict[str, Any]]:
    members: Dict[str, List[str]] = {}
    for component in architecture.components:
        members.setdefault(component.package, []).append(component.name)
    return [{"name": name, "components": names} for name, names in members.items()]


# ── HTML rendering ───────────────────────────────────────────────────


def generate_html(
    architecture: Architecture,
    output_path: Path,
    config: ReportConfig | None = None,
) -> str:
    """Write the HTML report and return its absolute path.

    Args:
        architecture: Analysis result
        output_path: Where to write the HTML file
        config: Title, theme and widget selection

    Returns:
        Absolute path to the generated HTML file
    """
    config = config or ReportConfig()
    page = render_html(architecture, config)
    out = Path(output_path).resolve()
    out.write_text(page, encoding="utf-8")
    return str(out)


def render_html(architecture: Architecture, config: ReportConfig) -> str:
    """Build the report page as a string."""
    data = build_report_data(architecture)
    widgets = [w for w in config.widgets if _widget_enabled(w, data)]

    sections = "".join(_WIDGET_RENDERERS[w](data) for w in widgets)
    scripts = "".join(_CHART_SCRIPTS.get(w, "") for w in widgets)
    # "</" inside the JSON would close the script element early
    data_json = json.dumps(data).replace("</", "<\\/")
    css = _LIGHT_VARS if config.theme == "light" else _DARK_VARS

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{html.escape(config.title)}</title>
<script src="{ECHARTS_URL}"></script>
<style>{css}{_BASE_CSS}</style>
</head>
<body><div class="container">
<header>
  <h1>{html.escape(config.title)}</h1>
  <p>{html.escape(config.description)}</p>
</header>
{sections}
<footer><p>Generated by Sharingan - Go Architecture Analyzer</p></footer>
</div>
<script>
const data = {data_json};
const charts = [];
{scripts}
window.addEventListener('resize', () => charts.forEach(c => c.resize()));
</script>
</body></html>
"""


def _widget_enabled(widget: Widget, data: Dict[str, Any]) -> bool:
    if widget is Widget.DEPENDENCY_MATRIX:
        return len(data["components"]) <= MATRIX_MAX_COMPONENTS
    return True


def _chart_box(element_id: str, heading: str, css_class: str = "chart-large", extra: str = "") -> str:
    half = " half" if css_class == "chart" else ""
    return (
        f'\n<div class="widget chart-box{half}">\n  <h3>{heading}</h3>\n'
        f'  <div id="{element_id}" class="{css_class}"></div>{extra}\n</div>'
    )


def _render_stats_cards(data: Dict[str, Any]) -> str:
    stats = data["stats"]
    cards = [
        (str(stats["totalComponents"]), "Components"),
        (str(stats["totalDependencies"]), "Dependencies"),
        (str(stats["packageCount"]), "Packages"),
        (f"{stats['avgDependencies']:.1f}", "Avg Deps"),
    ]
    body = "".join(
        f'<div class="stat-card"><div class="number">{value}</div>'
        f'<div class="label">{label}</div></div>'
        for value, label in cards
    )
    return f'\n<div class="widget stats-grid">{body}</div>'


def _render_architecture_graph(data: Dict[str, Any]) -> str:
    legend = "".join(
        f'<div class="legend-item"><div class="legend-color" style="background:{cat["color"]}">'
        f'</div><span>{cat["name"]}</span></div>'
        for cat in data["graph"]["categories"]
    )
    return _chart_box(
        "architecture-graph", "Architecture Graph", extra=f'\n  <div class="legend">{legend}</div>'
    )


def _render_components_table(data: Dict[str, Any]) -> str:
    rows = []
    for c in data["components"]:
        deps = ", ".join(c["dependencies"]) or "-"
        rows.append(
            f'<tr><td><strong>{html.escape(c["name"])}</strong></td>'
            f'<td><span class="badge" style="background:{c["color"]}22;color:{c["color"]}">'
            f'{c["type"]}</span></td>'
            f'<td>{html.escape(c["package"])}</td><td>{len(c["dependencies"])}</td>'
            f'<td class="deps-cell">{html.escape(deps)}</td></tr>'
        )
    return (
        '\n<div class="widget table-box">\n  <h3>All Components</h3>\n  <table>\n'
        "    <thead><tr><th>Name</th><th>Type</th><th>Package</th><th>Deps</th>"
        "<th>Dependencies</th></tr></thead>\n"
        f'    <tbody>{"".join(rows)}</tbody>\n  </table>\n</div>'
    )


_WIDGET_RENDERERS = {
    Widget.STATS_CARDS: _render_stats_cards,
    Widget.ARCHITECTURE_GRAPH: _render_architecture_graph,
    Widget.COMPONENTS_PIE: lambda data: _chart_box("components-pie", "Components by Type", "chart"),
    Widget.DEPENDENCIES_BAR: lambda data: _chart_box("dependencies-bar", "Top Dependencies", "chart"),
    Widget.LAYER_FLOW: lambda data: _chart_box("layer-flow", "Layer Flow"),
    Widget.DEPENDENCY_MATRIX: lambda data: _chart_box("dependency-matrix", "Dependency Matrix"),
    Widget.COMPONENTS_TABLE: _render_components_table,
    Widget.PACKAGE_TREE: lambda data: _chart_box("package-tree", "Package Structure"),
}


def _chart(element_id: str, option: str) -> str:
    return (
        "\n(function() {\n"
        f"  const el = document.getElementById('{element_id}');\n"
        "  if (!el) return;\n"
        "  const chart = echarts.init(el);\n"
        "  charts.push(chart);\n"
        f"{option}"
        "})();\n"
    )


_CHART_SCRIPTS = {
    Widget.ARCHITECTURE_GRAPH: _chart(
        "architecture-graph",
        """  chart.setOption({
    tooltip: { trigger: 'item', formatter: p => p.dataType === 'node'
      ? '<strong>' + p.data.name + '</strong><br/>Package: ' + p.data.package
      : p.data.source + ' → ' + p.data.target },
    series: [{
      type: 'graph', layout: 'force', roam: true, draggable: true,
      data: data.graph.nodes.map(n => ({ ...n,
        symbolSize: Math.max(35, n.value * 12),
        itemStyle: { color: data.graph.categories[n.category].color },
        label: { show: true, position: 'bottom', fontSize: 11, color: '#aaa' } })),
      links: data.graph.links.map(l => ({ ...l, lineStyle: { color: '#555', width: 2, curveness: 0.2 } })),
      categories: data.graph.categories,
      force: { repulsion: 400, gravity: 0.1, edgeLength: [80, 180] },
      emphasis: { focus: 'adjacency', lineStyle: { width: 4 } }
    }]
  });
""",
    ),
    Widget.COMPONENTS_PIE: _chart(
        "components-pie",
        """  const colors = Object.fromEntries(data.graph.categories.map(c => [c.name, c.color]));
  chart.setOption({
    tooltip: { trigger: 'item', formatter: '{b}: {c} ({d}%)' },
    series: [{ type: 'pie', radius: ['40%', '70%'], itemStyle: { borderRadius: 8, borderWidth: 2 },
      data: Object.entries(data.stats.componentsByType).map(([name, value]) =>
        ({ name, value, itemStyle: { color: colors[name] } })) }]
  });
""",
    ),
    Widget.DEPENDENCIES_BAR: _chart(
        "dependencies-bar",
        """  const top = [...data.components].sort((a, b) => b.dependencies.length - a.dependencies.length).slice(0, 10);
  chart.setOption({
    tooltip: { trigger: 'axis' },
    grid: { left: '3%', right: '4%', bottom: '3%', containLabel: true },
    xAxis: { type: 'value' },
    yAxis: { type: 'category', data: top.map(c => c.name) },
    series: [{ type: 'bar', barWidth: '60%', itemStyle: { borderRadius: [0, 4, 4, 0] },
      data: top.map(c => ({ value: c.dependencies.length, itemStyle: { color: c.color } })) }]
  });
""",
    ),
    Widget.LAYER_FLOW: _chart(
        "layer-flow",
        """  const nodes = data.layers.flatMap(layer => layer.components.map(name => ({ name })));
  const links = data.components.flatMap(c => c.dependencies.map(dep => ({ source: c.name, target: dep, value: 1 })));
  chart.setOption({
    tooltip: { trigger: 'item' },
    series: [{ type: 'sankey', layout: 'none', emphasis: { focus: 'adjacency' },
      data: nodes, links: links, lineStyle: { color: 'gradient', curveness: 0.5 } }]
  });
""",
    ),
    Widget.DEPENDENCY_MATRIX: _chart(
        "dependency-matrix",
        """  const cells = [];
  data.matrix.data.forEach((row, i) => row.forEach((val, j) => cells.push([j, i, val])));
  chart.setOption({
    tooltip: { formatter: p => p.data[2] ? data.matrix.labels[p.data[1]] + ' → ' + data.matrix.labels[p.data[0]] : '' },
    grid: { top: '10%', left: '15%', right: '5%', bottom: '15%' },
    xAxis: { type: 'category', data: data.matrix.labels, axisLabel: { rotate: 45, fontSize: 10 } },
    yAxis: { type: 'category', data: data.matrix.labels, axisLabel: { fontSize: 10 } },
    visualMap: { show: false, min: 0, max: 1, inRange: { color: ['#1a1a2e', '#50C878'] } },
    series: [{ type: 'heatmap', data: cells, itemStyle: { borderColor: '#333', borderWidth: 1 } }]
  });
""",
    ),
    Widget.PACKAGE_TREE: _chart(
        "package-tree",
        """  const tree = { name: 'packages', children: data.packages.map(pkg =>
    ({ name: pkg.name, children: pkg.components.map(c => ({ name: c })) })) };
  chart.setOption({
    tooltip: { trigger: 'item' },
    series: [{ type: 'tree', data: [tree], top: '10%', left: '10%', bottom: '10%', right: '10%',
      symbol: 'circle', symbolSize: 10, orient: 'TB', expandAndCollapse: true,
      label: { position: 'bottom', fontSize: 11 }, lineStyle: { color: '#555', width: 1.5, curveness: 0.5 } }]
  });
""",
    ),
}


_DARK_VARS = """
:root { --bg: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%); --text: #e4e4e4; --muted: #888;
  --border: rgba(255,255,255,0.1); --surface: rgba(255,255,255,0.05); --heading: #fff; --rule: #333; }
"""

_LIGHT_VARS = """
:root { --bg: linear-gradient(135deg, #f5f7fa 0%, #e4e8ec 100%); --text: #333; --muted: #666;
  --border: #e0e0e0; --surface: #fff; --heading: #333; --rule: #ddd; }
"""

_BASE_CSS = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
  background: var(--bg); min-height: 100vh; color: var(--text); }
.container { max-width: 1600px; margin: 0 auto; padding: 20px; }
header { text-align: center; padding: 30px 0; border-bottom: 1px solid var(--rule); margin-bottom: 30px; }
header h1 { font-size: 2.5rem; background: linear-gradient(90deg, #4A90D9, #50C878);
  -webkit-background-clip: text; -webkit-text-fill-color: transparent; margin-bottom: 10px; }
header p { color: var(--muted); font-size: 1.1rem; }
.widget { margin-bottom: 25px; }
.stats-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 20px; }
.stat-card, .chart-box, .table-box { background: var(--surface); border-radius: 12px; padding: 20px;
  border: 1px solid var(--border); }
.stat-card { text-align: center; transition: transform 0.2s; }
.stat-card:hover { transform: translateY(-5px); }
.stat-card .number { font-size: 2.5rem; font-weight: bold; background: linear-gradient(90deg, #4A90D9, #50C878);
  -webkit-background-clip: text; -webkit-text-fill-color: transparent; }
.stat-card .label { color: var(--muted); margin-top: 5px; }
.chart-box.half { display: inline-block; width: calc(50% - 12px); vertical-align: top; }
.chart-box.half:nth-of-type(odd) { margin-right: 20px; }
@media (max-width: 900px) { .chart-box.half { width: 100%; margin-right: 0; } }
.chart-box h3, .table-box h3 { margin-bottom: 15px; color: var(--heading); font-size: 1.2rem; }
.chart { width: 100%; height: 350px; }
.chart-large { width: 100%; height: 500px; }
.legend { display: flex; justify-content: center; gap: 25px; margin-top: 15px; flex-wrap: wrap; }
.legend-item { display: flex; align-items: center; gap: 8px; }
.legend-color { width: 14px; height: 14px; border-radius: 3px; }
.table-box { overflow-x: auto; }
table { width: 100%; border-collapse: collapse; }
th, td { padding: 12px 15px; text-align: left; border-bottom: 1px solid var(--border); }
th { background: var(--surface); font-weight: 600; }
.badge { display: inline-block; padding: 4px 12px; border-radius: 20px; font-size: 0.85rem; font-weight: 500; }
.deps-cell { font-size: 0.85rem; color: var(--muted); max-width: 300px; }
footer { text-align: center; padding: 30px 0; color: var(--muted); border-top: 1px solid var(--rule); margin-top: 30px; }
"""
