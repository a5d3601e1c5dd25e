"""Grammar for the line-oriented block/element notation.

A document is a block line followed by element lines::

    media-player[dark]
    button[fast-forward, rewind]
    timeline

Every line is an identifier with an optional bracketed modifier list. Only
square brackets delimit modifiers, whitespace is allowed only around the
modifiers inside the brackets and a trailing comma before ``]`` is accepted.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from lark import Lark

IDENTIFIER_PATTERN = r"[A-Za-z0-9-]+"

NOTATION_GRAMMAR = r"""
    start: line (_NEWLINE line)* _NEWLINE?

    line: IDENTIFIER modifier_list?

    modifier_list: "[" "]"
                 | "[" modifier ("," modifier)* ","? "]"

    modifier: _WS? IDENTIFIER _WS?

    IDENTIFIER: /%s/
    _WS: /[ \t]+/
    _NEWLINE: /(\r?\n)+/
""" % IDENTIFIER_PATTERN

_TERMINAL_NAMES = {
    "IDENTIFIER": "identifier",
    "LSQB": "'['",
    "RSQB": "']'",
    "COMMA": "','",
    "_WS": "whitespace",
    "_NEWLINE": "newline",
    "$END": "end of input",
}


@lru_cache
def get_parser() -> Lark:
    """Return the compiled LALR parser for the notation."""

    return Lark(NOTATION_GRAMMAR, parser="lalr", start="start")


def describe_terminal(name: str) -> str:
    return _TERMINAL_NAMES.get(name, name)


def describe_terminals(names: Iterable[str]) -> str:
    """Render lark terminal names as a readable, sorted list."""

    described = sorted({describe_terminal(name) for name in names})
    return ", ".join(described)


__all__ = [
    "IDENTIFIER_PATTERN",
    "NOTATION_GRAMMAR",
    "describe_terminal",
    "describe_terminals",
    "get_parser",
]
