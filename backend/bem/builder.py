"""Turn a notation parse tree into :class:`~bem.models.Block` values."""
from __future__ import annotations

from lark import Token, Tree

from .errors import StructuralError
from .models import Block, Element


def _describe(node: object) -> str:
    if isinstance(node, Tree):
        return f"rule '{node.data}'"
    if isinstance(node, Token):
        return f"token {node.type} {str(node)!r}"
    return repr(node)


def _modifiers(node: Tree) -> list[str]:
    modifiers: list[str] = []
    for child in node.children:
        if not isinstance(child, Tree) or child.data != "modifier":
            raise StructuralError(f"Unexpected {_describe(child)} inside a modifier list")
        tokens = [token for token in child.children if isinstance(token, Token)]
        if len(tokens) != 1 or len(child.children) != 1 or tokens[0].type != "IDENTIFIER":
            raise StructuralError(f"Malformed modifier node: {child!r}")
        value = str(tokens[0]).strip()
        if value:
            modifiers.append(value)
    return modifiers


def _line_parts(node: object) -> tuple[str, list[str]]:
    """Return the name and modifiers held by a ``line`` node."""

    if not isinstance(node, Tree) or node.data != "line":
        raise StructuralError(f"Expected a line, found {_describe(node)}")

    name: str | None = None
    modifiers: list[str] = []
    for child in node.children:
        if isinstance(child, Token) and child.type == "IDENTIFIER" and name is None:
            name = str(child)
        elif isinstance(child, Tree) and child.data == "modifier_list":
            modifiers = _modifiers(child)
        else:
            raise StructuralError(f"Unexpected {_describe(child)} in a line")

    if not name:
        raise StructuralError("Line without a name")
    return name, modifiers


def build_block(tree: Tree) -> Block:
    """Build a block from the tree produced by :func:`bem.grammar.get_parser`.

    The first line is the block, every following line is one of its elements.
    """

    if not isinstance(tree, Tree) or tree.data != "start":
        raise StructuralError(f"Expected a document, found {_describe(tree)}")
    if not tree.children:
        raise StructuralError("Document without a block line")

    first, *rest = tree.children
    name, modifiers = _line_parts(first)
    elements = [Element(*_line_parts(node)) for node in rest]
    return Block(name=name, modifiers=modifiers, elements=elements)


__all__ = ["build_block"]
