"""Architecture model: detected components and their resolved dependencies.

Both types are produced once per ``analyze`` call and treated as
read-only afterwards. Renderers must not mutate them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class ComponentKind(Enum):
    """Architectural layer a component belongs to."""

    HANDLER = "handler"  # transport: HTTP/gRPC servers and handlers
    SERVICE = "service"  # business logic
    REPOSITORY = "repository"  # data access
    ADAPTER = "adapter"  # external integrations


# Layer order used by summaries and reports: top of the stack first
LAYER_ORDER = (
    ComponentKind.HANDLER,
    ComponentKind.SERVICE,
    ComponentKind.ADAPTER,
    ComponentKind.REPOSITORY,
)


@dataclass
class Component:
    """A struct type recognised as an architectural unit.

    ``dependencies`` holds candidate names straight out of detection and
    is narrowed in place by the resolver to names of other components.
    """

    name: str
    kind: ComponentKind
    package: str  # short name from the package clause
    source_path: str  # relative to the repository root, '/'-separated
    dependencies: List[str] = field(default_factory=list)


@dataclass
class Architecture:
    """Top-level result of architecture analysis."""

    components: List[Component] = field(default_factory=list)  # discovery order
    dependency_index: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.components

    def components_of(self, kind: ComponentKind) -> List[Component]:
        return [c for c in self.components if c.kind is kind]

    def counts_by_kind(self) -> Dict[ComponentKind, int]:
        counts: Dict[ComponentKind, int] = {}
        for component in self.components:
            counts[component.kind] = counts.get(component.kind, 0) + 1
        return counts

    def dependency_count(self) -> int:
        """Total resolved dependency edges, counted from the index."""
        return sum(len(deps) for deps in self.dependency_index.values())

    def dependents_of(self, name: str) -> List[str]:
        """Names of components depending on ``name``, in component order."""
        return [c.name for c in self.components if name in c.dependencies]

    def packages(self) -> List[str]:
        """Distinct package names in discovery order."""
        seen: Dict[str, None] = {}
        for component in self.components:
            seen.setdefault(component.package, None)
        return list(seen)
