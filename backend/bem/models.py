"""Value objects describing one parsed block and its elements."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def _as_tuple(values: Iterable) -> tuple:
    return values if isinstance(values, tuple) else tuple(values)


@dataclass(frozen=True, slots=True)
class Element:
    """A named sub-part of a block.

    Parameters
    ----------
    name:
        Element identifier, e.g. ``button``.
    modifiers:
        Modifiers in the order they were written. Duplicates are kept.
    """

    name: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", _as_tuple(self.modifiers))


@dataclass(frozen=True, slots=True)
class Block:
    """The top-level component of a notation document.

    Parameters
    ----------
    name:
        Block identifier, e.g. ``media-player``.
    modifiers:
        Block modifiers in source order.
    elements:
        Elements in the order their lines appear after the block line.
    """

    name: str
    modifiers: tuple[str, ...] = ()
    elements: tuple[Element, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", _as_tuple(self.modifiers))
        object.__setattr__(self, "elements", _as_tuple(self.elements))

    def element_names(self) -> list[str]:
        return [element.name for element in self.elements]

    def find_element(self, name: str) -> Element | None:
        """Return the first element called ``name`` or ``None``."""

        for element in self.elements:
            if element.name == name:
                return element
        return None


__all__ = ["Block", "Element"]
