"""Colors and labels shared by the renderers."""

from typing import Dict

from ..architecture.models import ComponentKind

KIND_COLORS: Dict[ComponentKind, str] = {
    ComponentKind.HANDLER: "#4A90D9",  # blue
    ComponentKind.SERVICE: "#50C878",  # green
    ComponentKind.REPOSITORY: "#FFB347",  # orange
    ComponentKind.ADAPTER: "#9B59B6",  # purple
}

KIND_LABELS: Dict[ComponentKind, str] = {
    ComponentKind.HANDLER: "Handler",
    ComponentKind.SERVICE: "Service",
    ComponentKind.REPOSITORY: "Repository",
    ComponentKind.ADAPTER: "Adapter",
}

# Graph category index per kind (order of the report legend)
KIND_CATEGORIES: Dict[ComponentKind, int] = {
    ComponentKind.HANDLER: 0,
    ComponentKind.SERVICE: 1,
    ComponentKind.REPOSITORY: 2,
    ComponentKind.ADAPTER: 3,
}

EDGE_COLOR = "#666666"
