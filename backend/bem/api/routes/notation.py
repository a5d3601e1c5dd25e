"""Endpoints that expose parsing and the JSON codec."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from bem.api.deps import ensure_within_limit, get_app_settings
from bem.codec import deserialize, serialize
from bem.core.config import Settings
from bem.errors import DeserializationError, NotationSyntaxError, SerializationError, StructuralError
from bem.models import Block
from bem.parser import parse
from bem.schemas import (
    BlockSchema,
    DeserializeRequest,
    JsonResponse,
    NotationFileResponse,
    NotationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notation", tags=["notation"])


def _parse_or_raise(text: str) -> Block:
    try:
        return parse(text)
    except NotationSyntaxError as exc:
        logger.info("Rejected notation at line %s, column %s: %s", exc.line, exc.column, exc.reason)
        raise HTTPException(
            status_code=400,
            detail={
                "message": exc.reason,
                "line": exc.line,
                "column": exc.column,
                "fragment": exc.fragment,
            },
        ) from exc
    except StructuralError as exc:
        logger.exception("Parse tree did not match the block model")
        raise HTTPException(status_code=500, detail="Failed to build the block model") from exc


def _serialize_or_raise(block: Block) -> str:
    try:
        return serialize(block)
    except SerializationError as exc:
        logger.exception("Failed to serialize block '%s'", block.name)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post("/parse", response_model=BlockSchema)
def parse_notation(
    payload: NotationRequest,
    settings: Settings = Depends(get_app_settings),
) -> BlockSchema:
    text = ensure_within_limit(payload.text, settings)
    return BlockSchema.from_model(_parse_or_raise(text))


@router.post("/parse-file", response_model=NotationFileResponse)
async def parse_notation_file(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_app_settings),
) -> NotationFileResponse:
    contents = await file.read()
    try:
        text = contents.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail="Uploaded file is not valid UTF-8") from exc
    if not text.strip():
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    text = ensure_within_limit(text, settings)
    schema = BlockSchema.from_model(_parse_or_raise(text))
    return NotationFileResponse(filename=file.filename, **schema.model_dump())


@router.post("/serialize", response_model=JsonResponse)
def serialize_block(payload: BlockSchema) -> JsonResponse:
    return JsonResponse(json_text=_serialize_or_raise(payload.to_model()))


@router.post("/deserialize", response_model=BlockSchema)
def deserialize_block(
    payload: DeserializeRequest,
    settings: Settings = Depends(get_app_settings),
) -> BlockSchema:
    text = ensure_within_limit(payload.text, settings)
    try:
        block = deserialize(text)
    except DeserializationError as exc:
        logger.info("Rejected JSON block: %s", exc)
        raise HTTPException(
            status_code=400,
            detail={"field": exc.field, "reason": exc.reason},
        ) from exc
    return BlockSchema.from_model(block)


@router.post("/convert", response_model=JsonResponse)
def convert_notation(
    payload: NotationRequest,
    settings: Settings = Depends(get_app_settings),
) -> JsonResponse:
    """Parse a notation document and return its JSON rendering."""

    text = ensure_within_limit(payload.text, settings)
    return JsonResponse(json_text=_serialize_or_raise(_parse_or_raise(text)))
