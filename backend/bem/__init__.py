"""Parser and JSON codec for the block/element/modifier notation.

>>> block = parse("media-player[dark]\\nbutton[fast-forward,rewind]\\ntimeline")
>>> serialize(block)
'{"name":"media-player","modifiers":["dark"],"elements":[{"name":"button","modifiers":["fast-forward","rewind"]},{"name":"timeline","modifiers":[]}]}'
>>> deserialize(serialize(block)) == block
True
"""

from bem.codec import deserialize, serialize
from bem.errors import (
    BemError,
    DeserializationError,
    NotationSyntaxError,
    SerializationError,
    StructuralError,
)
from bem.models import Block, Element
from bem.parser import parse

__all__ = [
    "BemError",
    "Block",
    "DeserializationError",
    "Element",
    "NotationSyntaxError",
    "SerializationError",
    "StructuralError",
    "deserialize",
    "parse",
    "serialize",
]
