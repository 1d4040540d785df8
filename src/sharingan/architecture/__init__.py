"""Architecture extraction: interface catalog, component detection, resolution."""

from .analyzer import analyze
from .catalog import InterfaceCatalog, build_interface_catalog, interfaces_in
from .detector import components_in_tree, detect_components, extract_dependencies
from .heuristics import classify, is_noise, looks_like_dependency
from .models import LAYER_ORDER, Architecture, Component, ComponentKind
from .resolver import resolve_dependencies

__all__ = [
    "LAYER_ORDER",
    "Architecture",
    "Component",
    "ComponentKind",
    "InterfaceCatalog",
    "analyze",
    "build_interface_catalog",
    "classify",
    "components_in_tree",
    "detect_components",
    "extract_dependencies",
    "interfaces_in",
    "is_noise",
    "looks_like_dependency",
    "resolve_dependencies",
]
