"""Tree-sitter parser wrapper for Go sources.

Handles a missing tree-sitter dependency gracefully: the module always
imports, and ``GoParser.parse`` raises ``UnsupportedLanguageError`` when
the grammar is not installed.

Usage:
    parser = GoParser()
    tree = parser.parse_file(Path("internal/service/order.go"))
    package = package_name(tree.root_node)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from ..exceptions import FileAccessError, ParsingError, UnsupportedLanguageError

TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_go_module: Any = None

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]
    import tree_sitter_go as _go_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True
except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:
    from tree_sitter import Node, Tree

LANGUAGE = "go"


def get_supported_languages() -> list[str]:
    """Get list of languages with installed grammars."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return [LANGUAGE]


class GoParser:
    """Wrapper around tree-sitter configured with the Go grammar.

    Unlike tree-sitter itself, ``parse`` is strict: a tree with syntax
    errors, or one without a ``package`` clause, is rejected the way the
    Go toolchain rejects it.
    """

    def __init__(self) -> None:
        self._parser: Any = None
        if TREE_SITTER_AVAILABLE:
            # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
            language = _tree_sitter_module.Language(_go_module.language())
            self._parser = _tree_sitter_module.Parser(language)

    @property
    def available(self) -> bool:
        return self._parser is not None

    def parse(self, source: bytes, filepath: Union[str, Path] = "<memory>") -> Tree:
        """Parse Go source and return its syntax tree.

        Args:
            source: Source code as bytes
            filepath: Path used in error messages

        Raises:
            UnsupportedLanguageError: tree-sitter or the Go grammar is missing
            ParsingError: the source is not a well-formed Go file
        """
        if self._parser is None:
            raise UnsupportedLanguageError(LANGUAGE, get_supported_languages())

        tree = self._parser.parse(source)
        root = tree.root_node
        if root.has_error:
            raise ParsingError(Path(filepath), LANGUAGE, _describe_error(root))
        if not package_name(root):
            raise ParsingError(Path(filepath), LANGUAGE, "expected 'package' clause")
        return tree

    def parse_file(self, filepath: Path) -> Tree:
        """Read and parse a Go file.

        Raises:
            FileAccessError: the file cannot be read
            ParsingError: the file is not a well-formed Go file
        """
        try:
            source = filepath.read_bytes()
        except OSError as e:
            raise FileAccessError(filepath, str(e))
        return self.parse(source, filepath)


def package_name(root: Node) -> str:
    """Return the name declared by the file's ``package`` clause, or ''."""
    for child in root.named_children:
        if child.type == "package_clause":
            for ident in child.named_children:
                if ident.type == "package_identifier":
                    return node_text(ident)
    return ""


def node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text else ""


def _describe_error(root: Node) -> str:
    """Locate the first error or missing node for the error message."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_missing:
            line, col = node.start_point
            return f"missing {node.type} at {line + 1}:{col + 1}"
        if node.type == "ERROR":
            line, col = node.start_point
            return f"syntax error at {line + 1}:{col + 1}"
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return "syntax error"
