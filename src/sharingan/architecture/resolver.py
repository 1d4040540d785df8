"""Post-pass: resolve dependency names against the detected components.

Dependencies are extracted before it is known which field types survive
detection, so unresolved names are only pruned once the full component
set exists.
"""

from typing import Dict, List

from .models import Component


def resolve_dependencies(components: List[Component]) -> Dict[str, List[str]]:
    """Keep only dependencies naming a detected component.

    Narrows each component's ``dependencies`` in place, preserving order,
    and returns the name -> dependencies index. Resolution is by bare
    name: when two packages declare the same name, both match, and the
    index keeps the entry of the last one.
    """
    names = {component.name for component in components}

    index: Dict[str, List[str]] = {}
    for component in components:
        component.dependencies = [dep for dep in component.dependencies if dep in names]
        index[component.name] = component.dependencies
    return index
