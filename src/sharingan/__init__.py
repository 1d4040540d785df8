"""
Sharingan - Go Service Architecture Analyzer

Reads a Go codebase and extracts its architectural components (handlers,
services, repositories, adapters) and the dependencies between them,
from naming conventions and struct shape alone.
"""

__version__ = "1.0.0"

from .api import analyze
from .architecture.models import Architecture, Component, ComponentKind

__all__ = [
    "analyze",  # Main entry point
    "Architecture",
    "Component",
    "ComponentKind",
]
