"""Public API for Sharingan.

Example:
    >>> from sharingan import analyze
    >>>
    >>> architecture = analyze("/path/to/service")
    >>> [c.name for c in architecture.components]
    ['OrderHandler', 'OrderService', 'OrderRepository']
    >>>
    >>> # With an explicit config file and overrides
    >>> architecture = analyze("/path/to/service", config_file=Path("sharingan.toml"), max_files=500)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .architecture.analyzer import analyze as _analyze_repository
from .architecture.models import Architecture
from .config import load_config
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(
    repo_path: Union[str, Path] = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> Architecture:
    """Analyze a Go repository and return its architecture.

    Args:
        repo_path: Repository root (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., max_files=500)

    Returns:
        Architecture; empty if no components were detected

    Raises:
        EnumerationError: If the repository tree cannot be walked
        ConfigurationError: If configuration is invalid
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")
    return _analyze_repository(repo_path, config)
