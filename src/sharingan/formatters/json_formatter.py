"""JSON formatter for Sharingan."""

import json
from pathlib import Path
from typing import Any, Dict

from ..architecture.models import Architecture
from .base import BaseFormatter


def architecture_to_dict(architecture: Architecture) -> Dict[str, Any]:
    return {
        "components": [
            {
                "name": c.name,
                "type": c.kind.value,
                "package": c.package,
                "file_path": c.source_path,
                "dependencies": list(c.dependencies),
            }
            for c in architecture.components
        ],
        "dependencies": {name: list(deps) for name, deps in architecture.dependency_index.items()},
    }


class JsonFormatter(BaseFormatter):
    """Render the architecture as JSON."""

    def render(self, architecture: Architecture) -> None:
        print(self.format(architecture))

    def format(self, architecture: Architecture) -> str:
        return json.dumps(architecture_to_dict(architecture), indent=2)


def write_json(architecture: Architecture, output_path: Path) -> str:
    """Write the JSON export to ``output_path`` and return its absolute path."""
    out = Path(output_path).resolve()
    out.write_text(JsonFormatter().format(architecture), encoding="utf-8")
    return str(out)
