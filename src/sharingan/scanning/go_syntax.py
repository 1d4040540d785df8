"""Helpers for walking Go syntax trees produced by tree-sitter-go."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Optional

from .treesitter_parser import node_text

if TYPE_CHECKING:
    from tree_sitter import Node

# ``type X struct{}`` and ``type X = struct{}`` both declare a named type
TYPE_DECLARATION_NODES = ("type_spec", "type_alias")


def iter_type_declarations(root: Node) -> Iterator[tuple[str, Node]]:
    """Yield (name, type_node) for every named type declaration.

    Walks the whole tree in source order, so grouped declarations
    (``type ( ... )``) and declarations local to a function body are
    included.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in TYPE_DECLARATION_NODES:
            name_node = node.child_by_field_name("name")
            type_node = node.child_by_field_name("type")
            if name_node is not None and type_node is not None:
                yield node_text(name_node), type_node
        stack.extend(reversed(node.named_children))


def iter_field_types(struct_node: Node) -> Iterator[Node]:
    """Yield the type node of each field declaration of a struct type.

    Embedded fields are included; names sharing one type yield it once.
    """
    for child in struct_node.named_children:
        if child.type != "field_declaration_list":
            continue
        for field in child.named_children:
            if field.type != "field_declaration":
                continue
            type_node = field.child_by_field_name("type")
            if type_node is not None:
                yield type_node


def resolve_type_name(type_node: Optional[Node]) -> str:
    """Reduce a type expression to the bare name it refers to.

    ``Foo`` -> ``Foo``, ``*Foo`` -> ``Foo``, ``pkg.Foo`` -> ``Foo``,
    ``**pkg.Foo`` -> ``Foo``. Anything else (generic instantiations,
    slices, maps, channels, function types, literal struct or interface
    types, parenthesized types) resolves to ''.
    """
    if type_node is None:
        return ""
    if type_node.type == "type_identifier":
        return node_text(type_node)
    if type_node.type == "pointer_type":
        pointee = type_node.named_children
        return resolve_type_name(pointee[0]) if pointee else ""
    if type_node.type == "qualified_type":
        return resolve_type_name(type_node.child_by_field_name("name"))
    return ""
