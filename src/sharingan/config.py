"""Configuration loading and management for Sharingan.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.sharingan.toml)
    3. Project config (./sharingan.toml)
    4. Explicit config file
    5. Environment variables (SHARINGAN_* prefix)
    6. CLI overrides (passed as kwargs)

Only source-tree enumeration is configurable. The classification
heuristics in ``sharingan.architecture.heuristics`` are fixed tables.

Example:
    >>> config = load_config(max_files=500)
    >>> config.max_files
    500
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError, InvalidPathError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for source-tree enumeration.

    Attributes:
        excluded_dirs: Directory names that are never descended into
        source_suffix: Suffix of candidate source files
        test_suffix: Suffix of test files, which are never analyzed
        mock_markers: Substrings of the root-relative path that mark mock code
        max_file_size_mb: Files larger than this are skipped (None: no limit)
        max_files: Enumeration stops after this many files (None: no limit)
        follow_symlinks: Descend into symlinked directories
        verbosity: Logging verbosity level
    """

    excluded_dirs: tuple[str, ...] = ("vendor", ".git", "node_modules", "mock", "mocks")
    source_suffix: str = ".go"
    test_suffix: str = "_test.go"
    mock_markers: tuple[str, ...] = ("/mock", "_mock")

    max_file_size_mb: Optional[float] = None
    max_files: Optional[int] = None
    follow_symlinks: bool = False

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.source_suffix:
            raise InvalidConfigError("source_suffix", self.source_suffix, "must not be empty")
        if self.max_file_size_mb is not None and self.max_file_size_mb <= 0:
            raise InvalidConfigError(
                "max_file_size_mb", self.max_file_size_mb, "must be positive"
            )
        if self.max_files is not None and self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITY_LEVELS)}"
            )

    @property
    def max_file_size_bytes(self) -> Optional[int]:
        """Get max file size in bytes, or None when unlimited."""
        if self.max_file_size_mb is None:
            return None
        return int(self.max_file_size_mb * 1024 * 1024)


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        InvalidPathError: If the explicit config file does not exist
        ConfigurationError: If a config file is malformed
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".sharingan.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "sharingan.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise InvalidPathError(config_file, "config file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Boolean CLI flags collapse into a verbosity level
    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key in ("excluded_dirs", "mock_markers"):
        if key in merged:
            value = merged[key]
            if not isinstance(value, (list, tuple)):
                raise InvalidConfigError(key, value, "expected a list of strings")
            merged[key] = tuple(str(v) for v in value)

    return AnalysisConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load scalar configuration fields from SHARINGAN_* environment variables.

    Returns:
        Dict of field_name -> parsed_value for any SHARINGAN_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"SHARINGAN_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed in a single variable
    (tuples of directory names, for instance).
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] parses as X
    if origin is Union:
        args = [a for a in type_hint.__args__ if a is not type(None)]
        if len(args) == 1:
            return _parse_env_value(value, args[0])
        return None

    if origin is tuple or type_hint is tuple:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    The ``[sharingan]`` table is used when present; otherwise the whole
    document is treated as configuration.
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("sharingan")
    if isinstance(section, dict):
        return section
    return data
