"""First pass: catalog every interface type declared in the repository.

A field typed by a cataloged interface is treated as a collaborator in
the second pass, whatever its name. The catalog must therefore be
complete before any file is classified.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet

from ..exceptions import FileAccessError, ParsingError
from ..logging_config import get_logger
from ..scanning.go_syntax import iter_type_declarations
from ..scanning.treesitter_parser import GoParser

if TYPE_CHECKING:
    from tree_sitter import Node

logger = get_logger(__name__)

InterfaceCatalog = FrozenSet[str]


def interfaces_in(root: Node) -> set[str]:
    """Names of the interface types declared anywhere in one syntax tree."""
    return {
        name
        for name, type_node in iter_type_declarations(root)
        if type_node.type == "interface_type"
    }


def build_interface_catalog(paths: Iterable[Path], parser: GoParser) -> InterfaceCatalog:
    """Collect interface names across all files.

    Files that cannot be read or parsed contribute nothing.

    Args:
        paths: Candidate source files
        parser: Go parser

    Returns:
        Frozen set of interface names
    """
    names: set[str] = set()
    for path in paths:
        try:
            tree = parser.parse_file(path)
        except (FileAccessError, ParsingError) as e:
            logger.debug(f"Catalog skipped {path}: {e.reason}")
            continue
        names |= interfaces_in(tree.root_node)

    logger.debug(f"Cataloged {len(names)} interfaces")
    return frozenset(names)
