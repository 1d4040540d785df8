"""Analysis-related exceptions: tree walking, file access, parsing."""

from pathlib import Path
from typing import List

from .base import SharinganError


class AnalysisError(SharinganError):
    """Base class for analysis-related errors."""
    pass


class EnumerationError(AnalysisError):
    """Raised when the repository tree cannot be walked.

    This is the only error that aborts an analysis run.
    """

    def __init__(self, root: Path, reason: str):
        super().__init__(
            f"Cannot walk repository: {root}",
            details={"root": str(root), "reason": reason},
        )
        self.root = root


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath


class ParsingError(AnalysisError):
    """Raised when file content cannot be parsed."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language


class UnsupportedLanguageError(AnalysisError):
    """Raised when the grammar for a language is not installed."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages
