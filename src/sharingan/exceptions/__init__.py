"""Exception hierarchy for Sharingan."""

from .analysis import (
    AnalysisError,
    EnumerationError,
    FileAccessError,
    ParsingError,
    UnsupportedLanguageError,
)
from .base import SharinganError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "SharinganError",
    "AnalysisError",
    "EnumerationError",
    "FileAccessError",
    "ParsingError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
