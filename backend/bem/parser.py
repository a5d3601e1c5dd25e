"""Parse notation text into a :class:`~bem.models.Block`."""
from __future__ import annotations

import logging

from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .builder import build_block
from .errors import NotationSyntaxError
from .grammar import describe_terminal, describe_terminals, get_parser
from .models import Block

logger = logging.getLogger(__name__)


def _fragment(text: str, line: int, column: int) -> str:
    """Return the offending source line with a caret under ``column``."""

    lines = text.splitlines() or [""]
    source = lines[line - 1] if 0 < line <= len(lines) else ""
    return f"{source}\n{' ' * max(column - 1, 0)}^"


def _end_position(text: str) -> tuple[int, int]:
    lines = text.split("\n")
    return len(lines), len(lines[-1]) + 1


def _syntax_error(text: str, exc: UnexpectedInput) -> NotationSyntaxError:
    if isinstance(exc, UnexpectedCharacters):
        line, column = exc.line, exc.column
        reason = f"unexpected character {exc.char!r}"
        expected = exc.allowed
    elif isinstance(exc, UnexpectedToken):
        line, column = exc.line, exc.column
        token = exc.token
        if token.type == "$END":
            line, column = _end_position(text)
            reason = "unexpected end of input"
        else:
            reason = f"unexpected {describe_terminal(token.type)} {str(token)!r}"
        expected = exc.expected
    elif isinstance(exc, UnexpectedEOF):
        line, column = _end_position(text)
        reason = "unexpected end of input"
        expected = exc.expected
    else:
        line, column = exc.line, exc.column
        reason = str(exc).strip() or "invalid input"
        expected = ()

    if expected:
        reason = f"{reason}, expected one of: {describe_terminals(expected)}"
    return NotationSyntaxError(
        reason,
        line=line,
        column=column,
        fragment=_fragment(text, line, column),
    )


def parse(text: str) -> Block:
    """Parse a notation document.

    The first line names the block, each following non-blank line names one
    element. Raises :class:`~bem.errors.NotationSyntaxError` when ``text`` does
    not match the grammar.
    """

    try:
        tree = get_parser().parse(text)
    except UnexpectedInput as exc:
        raise _syntax_error(text, exc) from exc

    block = build_block(tree)
    logger.debug("Parsed block '%s' with %d element(s)", block.name, len(block.elements))
    return block


__all__ = ["parse"]
