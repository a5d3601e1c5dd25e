"""Render blocks as JSON text and read them back.

The wire format is a compact JSON object with the fields ``name``,
``modifiers`` and ``elements`` in that order::

    {"name":"media-player","modifiers":["dark"],"elements":[{"name":"timeline","modifiers":[]}]}
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DeserializationError, SerializationError
from .models import Block
from .schemas import BlockSchema

logger = logging.getLogger(__name__)


def _field_path(loc: tuple[Any, ...]) -> str | None:
    if not loc:
        return None
    return ".".join(str(part) for part in loc)


def _deserialization_error(exc: ValidationError) -> DeserializationError:
    """Describe the first problem reported by pydantic."""

    error = exc.errors()[0]
    kind = error.get("type")
    field = _field_path(tuple(error.get("loc", ())))

    if kind == "json_invalid":
        detail = (error.get("ctx") or {}).get("error") or error.get("msg", "")
        return DeserializationError(f"invalid JSON: {detail}")
    if kind == "missing":
        return DeserializationError(f"missing required field '{field}'", field=field)
    if kind == "model_type" and field is None:
        return DeserializationError("expected a JSON object describing a block")
    if kind == "string_pattern_mismatch":
        return DeserializationError(
            f"{error.get('input')!r} is not a valid identifier",
            field=field,
        )
    return DeserializationError(error.get("msg", "invalid value"), field=field)


def serialize(block: Block) -> str:
    """Return the compact JSON text for ``block``."""

    try:
        return BlockSchema.from_model(block).model_dump_json()
    except ValidationError as exc:
        error = exc.errors()[0]
        field = _field_path(tuple(error.get("loc", ()))) or "block"
        raise SerializationError(f"Cannot serialize {field}: {error.get('msg')}") from exc
    except PydanticSerializationError as exc:
        raise SerializationError(f"Cannot serialize block: {exc}") from exc
    except TypeError as exc:
        raise SerializationError(f"Not a block: {type(block).__name__}") from exc


def deserialize(text: str | bytes) -> Block:
    """Read a block from JSON text.

    ``name`` is required on the block and on every element. Missing
    ``modifiers`` or ``elements`` are read as empty and unknown fields are
    ignored.
    """

    try:
        schema = BlockSchema.model_validate_json(text)
    except ValidationError as exc:
        error = _deserialization_error(exc)
        logger.debug("Rejected JSON block: %s", error)
        raise error from exc
    return schema.to_model()


__all__ = ["deserialize", "serialize"]
