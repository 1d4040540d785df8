"""Architecture analysis of a Go repository.

Orchestrates:
1. Interface catalog (first pass over every source file)
2. Component detection (second pass, using the complete catalog)
3. Dependency resolution against the detected components
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..logging_config import get_logger
from ..scanning.enumerator import iter_source_files
from ..scanning.treesitter_parser import GoParser
from .catalog import build_interface_catalog
from .detector import detect_components
from .models import Architecture, Component
from .resolver import resolve_dependencies

logger = get_logger(__name__)


def analyze(
    repo_path: Union[str, Path],
    config: Optional[AnalysisConfig] = None,
    parser: Optional[GoParser] = None,
) -> Architecture:
    """Extract the architecture of the repository at ``repo_path``.

    The two passes walk the tree separately and in the same order, so
    component order is the file walk order. Files that fail to parse are
    skipped in both passes. An empty result is a valid Architecture.

    Args:
        repo_path: Repository root
        config: Enumeration settings (defaults to DEFAULT_CONFIG)
        parser: Go parser to reuse across calls

    Returns:
        Architecture with resolved dependencies

    Raises:
        EnumerationError: the repository tree cannot be walked
        UnsupportedLanguageError: the Go grammar is not installed
    """
    root = Path(repo_path)
    config = config or DEFAULT_CONFIG
    parser = parser or GoParser()

    catalog = build_interface_catalog(iter_source_files(root, config), parser)

    components: List[Component] = []
    for path in iter_source_files(root, config):
        components.extend(detect_components(path, root, catalog, parser))

    dependency_index = resolve_dependencies(components)
    architecture = Architecture(components=components, dependency_index=dependency_index)

    logger.info(
        f"Detected {len(components)} components with "
        f"{architecture.dependency_count()} dependencies in {root}"
    )
    return architecture
