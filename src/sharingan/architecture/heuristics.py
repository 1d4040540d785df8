"""Naming and layout heuristics for component detection.

Every table here is a fixed tuple. Classification output must stay
compatible across runs and installations, so none of it is configurable.
"""

from typing import Optional, Sequence

from .models import ComponentKind

# ── Noise filter ─────────────────────────────────────────────────────

TRANSPORT_SUFFIXES = ("Request", "Response")

CONFIG_SUFFIXES = ("Config", "Conf")

# Generic value / DTO suffixes
VALUE_SUFFIXES = (
    "Options",
    "Params",
    "Data",
    "Info",
    "Result",
    "Error",
    "Context",
    "Structure",
    "Content",
    "Template",
    "Section",
    "Message",
    "Event",
    "Item",
    "Entry",
)

# ── Dependency detection ─────────────────────────────────────────────

DEPENDENCY_MARKERS = (
    "service",
    "store",
    "repo",
    "repository",
    "client",
    "api",
    "adapter",
    "provider",
    "auth",
    "logger",
    "db",
    "database",
    "generative",
    "generator",
)

# ── Layer classification ─────────────────────────────────────────────

HANDLER_PATH_MARKERS = ("transport", "http", "handler", "api")
HANDLER_NAME_MARKERS = ("server", "handler")

REPOSITORY_PATH_MARKERS = ("persistence", "repository", "repo", "store")
REPOSITORY_NAME_SUFFIXES = ("Repository", "Store")

ADAPTER_PATH_MARKERS = ("adapter", "client", "external", "integration")

SERVICE_PATH_MARKERS = ("service", "usecase")

# A struct wiring together this many collaborators is treated as a service
FALLBACK_SERVICE_MIN_DEPENDENCIES = 2


def is_noise(name: str) -> bool:
    """Check whether a struct name marks a non-architectural type.

    Mocks, transport payloads, configuration records, generic value types,
    very short names and unexported types are all noise.
    """
    if not name:
        return True

    lower = name.lower()

    if "mock" in lower:
        return True

    if name.endswith(TRANSPORT_SUFFIXES):
        return True

    if name.endswith(CONFIG_SUFFIXES) or "config" in lower or name == "Config":
        return True

    if name.endswith(VALUE_SUFFIXES):
        return True

    # Length in UTF-8 bytes, as Go measures identifiers
    if len(name.encode("utf-8")) <= 2 and name != "DB":
        return True

    # Unexported
    if "a" <= name[0] <= "z":
        return True

    return False


def looks_like_dependency(type_name: str) -> bool:
    """Check whether a field type name reads like a collaborator."""
    lower = type_name.lower()
    return any(marker in lower for marker in DEPENDENCY_MARKERS)


def _contains_any(text: str, markers: Sequence[str]) -> bool:
    return any(marker in text for marker in markers)


def classify(
    package_path: str, name: str, dependencies: Sequence[str]
) -> Optional[ComponentKind]:
    """Assign a layer to a struct, or None if it is not a component.

    Rules are tried in a fixed order and the first match wins:
    handler, repository, adapter, service, then the multi-dependency
    fallback. Handler and service rules require at least one dependency.

    Args:
        package_path: Directory of the declaring file relative to the root
        name: Struct name
        dependencies: Candidate dependency names extracted from its fields

    Returns:
        ComponentKind or None
    """
    path = package_path.lower()
    lower = name.lower()

    if _contains_any(path, HANDLER_PATH_MARKERS) or _contains_any(lower, HANDLER_NAME_MARKERS):
        if dependencies:
            return ComponentKind.HANDLER

    if "config" not in path:
        if (
            _contains_any(path, REPOSITORY_PATH_MARKERS)
            or name == "DB"
            or name.endswith(REPOSITORY_NAME_SUFFIXES)
        ):
            return ComponentKind.REPOSITORY

    if _contains_any(path, ADAPTER_PATH_MARKERS):
        return ComponentKind.ADAPTER

    if _contains_any(path, SERVICE_PATH_MARKERS) or name == "Service" or name.endswith("Service"):
        if dependencies:
            return ComponentKind.SERVICE

    if len(dependencies) >= FALLBACK_SERVICE_MIN_DEPENDENCIES:
        return ComponentKind.SERVICE

    return None
