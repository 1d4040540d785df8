"""Base formatter interface for Sharingan output rendering."""

from abc import ABC, abstractmethod

from ..architecture.models import Architecture


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, architecture: Architecture) -> None:
        """Render the architecture to the terminal."""

    @abstractmethod
    def format(self, architecture: Architecture) -> str:
        """Return formatted string representation of the architecture."""
