"""Source enumeration: lazily walk a repository for candidate Go files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..exceptions import EnumerationError
from ..logging_config import get_logger

logger = get_logger(__name__)


def is_source_file(relative: str, config: AnalysisConfig = DEFAULT_CONFIG) -> bool:
    """Check whether a root-relative POSIX path is a candidate source file.

    Args:
        relative: Path relative to the repository root, '/'-separated
        config: Enumeration settings

    Returns:
        True if the file has the source suffix, is not a test file, and
        carries no mock marker
    """
    if not relative.endswith(config.source_suffix):
        return False
    if relative.endswith(config.test_suffix):
        return False
    anchored = "/" + relative
    return not any(marker in anchored for marker in config.mock_markers)


def iter_source_files(root: Path, config: Optional[AnalysisConfig] = None) -> Iterator[Path]:
    """Yield candidate source files under root, depth first in name order.

    Excluded directories are pruned below the root. The walk order is
    stable across runs, and component order is derived from it. The size
    and file-count limits are off unless configured; when set, a hit is
    logged as a warning.

    Args:
        root: Repository root
        config: Enumeration settings (defaults to DEFAULT_CONFIG)

    Raises:
        EnumerationError: root is missing, is not a directory, or some
            directory under it cannot be listed
    """
    config = config or DEFAULT_CONFIG
    root = Path(root)
    if not root.exists():
        raise EnumerationError(root, "no such directory")
    if not root.is_dir():
        raise EnumerationError(root, "not a directory")

    excluded = set(config.excluded_dirs)
    size_limit = config.max_file_size_bytes
    skipped = 0

    def walk(directory: Path) -> Iterator[Path]:
        nonlocal skipped
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except OSError as e:
            raise EnumerationError(root, f"{directory}: {e.strerror or e}")

        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=config.follow_symlinks):
                if entry.name in excluded:
                    logger.debug(f"Skipped directory: {path}")
                    continue
                yield from walk(path)
                continue

            relative = path.relative_to(root).as_posix()
            if not is_source_file(relative, config):
                continue

            if size_limit is not None:
                try:
                    size = entry.stat().st_size
                except OSError as e:
                    skipped += 1
                    logger.debug(f"Cannot stat {path}: {e}")
                    continue
                if size > size_limit:
                    skipped += 1
                    logger.warning(f"Skipped (size): {path} ({size} bytes)")
                    continue

            yield path

    count = 0
    for path in walk(root):
        if config.max_files is not None and count >= config.max_files:
            logger.warning(f"Reached max files limit ({config.max_files}), results are partial")
            return
        count += 1
        yield path

    logger.info(f"Enumerated {count} source files under {root} ({skipped} skipped)")
