"""Pydantic schemas shared by the codec and the HTTP API."""

from bem.schemas.notation import (
    BlockSchema,
    DeserializeRequest,
    ElementSchema,
    JsonResponse,
    NotationFileResponse,
    NotationRequest,
)

__all__ = [
    "BlockSchema",
    "DeserializeRequest",
    "ElementSchema",
    "JsonResponse",
    "NotationFileResponse",
    "NotationRequest",
]
