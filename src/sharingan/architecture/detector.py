"""Second pass: detect architectural components in each source file.

For every struct type declaration, the detector:
1. Discards noise (mocks, DTOs, configs, unexported types)
2. Extracts dependency names from the field types
3. Classifies the struct into a layer, or drops it
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, List

from ..exceptions import FileAccessError, ParsingError
from ..logging_config import get_logger
from ..scanning.go_syntax import iter_field_types, iter_type_declarations, resolve_type_name
from ..scanning.treesitter_parser import GoParser, package_name
from .catalog import InterfaceCatalog
from .heuristics import classify, is_noise, looks_like_dependency
from .models import Component

if TYPE_CHECKING:
    from tree_sitter import Node

logger = get_logger(__name__)


def extract_dependencies(struct_node: Node, catalog: InterfaceCatalog) -> List[str]:
    """Candidate dependency names of a struct, in field order.

    A field counts when its type resolves to a bare name that is either a
    cataloged interface or reads like a collaborator. Each name is kept
    once, at its first occurrence.
    """
    deps: List[str] = []
    seen: set[str] = set()
    for type_node in iter_field_types(struct_node):
        type_name = resolve_type_name(type_node)
        if not type_name or type_name in seen:
            continue
        if type_name in catalog or looks_like_dependency(type_name):
            deps.append(type_name)
            seen.add(type_name)
    return deps


def components_in_tree(
    root: Node,
    source_path: str,
    catalog: InterfaceCatalog,
) -> List[Component]:
    """Detect components in one parsed file.

    Args:
        root: Root node of the file's syntax tree
        source_path: File path relative to the repository root, '/'-separated
        catalog: Interface names from the first pass

    Returns:
        Components in declaration order
    """
    package = package_name(root)
    package_path = str(PurePosixPath(source_path).parent)

    components: List[Component] = []
    for name, type_node in iter_type_declarations(root):
        if type_node.type != "struct_type":
            continue
        if is_noise(name):
            continue

        deps = extract_dependencies(type_node, catalog)
        kind = classify(package_path, name, deps)
        if kind is None:
            continue

        components.append(
            Component(
                name=name,
                kind=kind,
                package=package,
                source_path=source_path,
                dependencies=deps,
            )
        )
    return components


def detect_components(
    path: Path,
    root: Path,
    catalog: InterfaceCatalog,
    parser: GoParser,
) -> List[Component]:
    """Detect components in a source file.

    A file that cannot be read or parsed yields no components.
    """
    try:
        tree = parser.parse_file(path)
    except (FileAccessError, ParsingError) as e:
        logger.debug(f"Detection skipped {path}: {e.reason}")
        return []

    source_path = path.relative_to(root).as_posix()
    return components_in_tree(tree.root_node, source_path, catalog)
