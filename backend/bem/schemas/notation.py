"""Pydantic schemas for the JSON wire format and the notation endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from bem.grammar import IDENTIFIER_PATTERN
from bem.models import Block, Element

Identifier = Annotated[str, StringConstraints(strict=True, pattern=f"^{IDENTIFIER_PATTERN}$")]


class ElementSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Identifier = Field(..., description="Element name, e.g. 'button'")
    modifiers: List[Identifier] = Field(
        default_factory=list,
        description="Element modifiers in source order",
    )

    def to_model(self) -> Element:
        return Element(name=self.name, modifiers=self.modifiers)


class BlockSchema(BaseModel):
    """Wire shape of a block. Field order is part of the JSON format."""

    model_config = ConfigDict(extra="ignore")

    name: Identifier = Field(..., description="Block name, e.g. 'media-player'")
    modifiers: List[Identifier] = Field(
        default_factory=list,
        description="Block modifiers in source order",
    )
    elements: List[ElementSchema] = Field(
        default_factory=list,
        description="Elements in the order they were declared",
    )

    @classmethod
    def from_model(cls, block: Block) -> "BlockSchema":
        return cls.model_validate(asdict(block))

    def to_model(self) -> Block:
        return Block(
            name=self.name,
            modifiers=self.modifiers,
            elements=[element.to_model() for element in self.elements],
        )


class NotationRequest(BaseModel):
    text: str = Field(..., description="Notation document, one block line followed by element lines")


class DeserializeRequest(BaseModel):
    text: str = Field(..., description="JSON text describing a block")


class JsonResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    json_text: str = Field(..., alias="json", description="Compact JSON rendering of the block")


class NotationFileResponse(BlockSchema):
    filename: Optional[str] = Field(default=None, description="Original uploaded file name")
