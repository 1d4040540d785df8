"""Go source enumeration and parsing."""

from .enumerator import is_source_file, iter_source_files
from .go_syntax import iter_field_types, iter_type_declarations, resolve_type_name
from .treesitter_parser import (
    TREE_SITTER_AVAILABLE,
    GoParser,
    get_supported_languages,
    package_name,
)

__all__ = [
    "TREE_SITTER_AVAILABLE",
    "GoParser",
    "get_supported_languages",
    "is_source_file",
    "iter_field_types",
    "iter_source_files",
    "iter_type_declarations",
    "package_name",
    "resolve_type_name",
]
