"""Tests for the block and element value objects."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from bem import Block, Element


def test_lists_are_stored_as_tuples() -> None:
    block = Block("card", ["wide"], [Element("title", ["bold"])])

    assert block.modifiers == ("wide",)
    assert block.elements == (Element("title", ("bold",)),)
    assert block.elements[0].modifiers == ("bold",)


def test_blocks_are_immutable() -> None:
    block = Block("card")

    with pytest.raises(FrozenInstanceError):
        block.name = "other"  # type: ignore[misc]


def test_blocks_are_hashable() -> None:
    assert hash(Block("card", ("wide",))) == hash(Block("card", ["wide"]))


def test_find_element_returns_first_match() -> None:
    block = Block("list", (), (Element("item", ("first",)), Element("item", ("second",))))

    assert block.find_element("item") == Element("item", ("first",))
    assert block.find_element("missing") is None
    assert block.element_names() == ["item", "item"]
