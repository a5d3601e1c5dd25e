"""Unit tests for parsing the block/element notation."""

from __future__ import annotations

import pytest

from bem import Block, Element, NotationSyntaxError, parse


def test_single_name() -> None:
    assert parse("name") == Block(name="name", modifiers=(), elements=())


def test_block_modifiers_keep_order() -> None:
    block = parse("foo[bar,baz]")

    assert block.name == "foo"
    assert block.modifiers == ("bar", "baz")
    assert block.elements == ()


def test_trailing_comma_adds_no_modifier() -> None:
    assert parse("foo[bar,baz,]").modifiers == ("bar", "baz")


def test_whitespace_around_modifiers_is_trimmed() -> None:
    assert parse("foo[ bar , baz ]").modifiers == ("bar", "baz")


def test_empty_modifier_list() -> None:
    assert parse("foo[]") == Block(name="foo")


def test_duplicate_modifiers_are_kept() -> None:
    assert parse("foo[dark,dark,light]").modifiers == ("dark", "dark", "light")


def test_elements_follow_block_line() -> None:
    block = parse("foo\nbar\nbaz")

    assert block == Block(
        name="foo",
        modifiers=(),
        elements=(Element("bar", ()), Element("baz", ())),
    )


def test_trailing_blank_lines_are_ignored() -> None:
    assert parse("foo\n\n\n") == Block(name="foo", modifiers=(), elements=())


def test_blank_lines_between_elements_are_skipped() -> None:
    block = parse("foo\nbar\n\n\nbaz\n")

    assert block.element_names() == ["bar", "baz"]


def test_windows_line_endings() -> None:
    block = parse("media-player[dark]\r\nbutton[rewind]\r\ntimeline\r\n")

    assert block == Block(
        name="media-player",
        modifiers=("dark",),
        elements=(Element("button", ("rewind",)), Element("timeline")),
    )


def test_full_document() -> None:
    block = parse("media-player[dark]\nbutton[fast-forward, rewind]\ntimeline")

    assert block.name == "media-player"
    assert block.modifiers == ("dark",)
    assert block.find_element("button") == Element("button", ("fast-forward", "rewind"))
    assert block.find_element("timeline") == Element("timeline", ())


def test_names_keep_case_and_hyphens() -> None:
    block = parse("Media-Player-2[-x-,Dark]\n-el-")

    assert block.name == "Media-Player-2"
    assert block.modifiers == ("-x-", "Dark")
    assert block.elements == (Element("-el-"),)


def test_parentheses_are_rejected() -> None:
    with pytest.raises(NotationSyntaxError) as info:
        parse("foo(bar)")

    error = info.value
    assert error.line == 1
    assert error.column == 4
    assert "'('" in error.reason
    assert error.fragment.splitlines() == ["foo(bar)", "   ^"]


def test_error_position_on_element_line() -> None:
    with pytest.raises(NotationSyntaxError) as info:
        parse("foo[a]\nbar[b]\nbaz|qux")

    assert info.value.line == 3
    assert info.value.column == 4
    assert info.value.fragment.startswith("baz|qux")


def test_unterminated_bracket() -> None:
    with pytest.raises(NotationSyntaxError) as info:
        parse("foo[bar")

    assert "end of input" in info.value.reason
    assert "']'" in info.value.reason


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\nfoo",
        "foo bar",
        "foo_bar",
        "foo[bar baz]",
        "foo[,]",
        "foo[bar,,baz]",
        "foo[bar]]",
        "foo[bar]baz",
        "foo\n  bar",
        "foo(dark|light)\nbutton",
    ],
)
def test_invalid_documents(text: str) -> None:
    with pytest.raises(NotationSyntaxError):
        parse(text)


def test_syntax_error_message_includes_position() -> None:
    with pytest.raises(NotationSyntaxError, match=r"line 1, column 4"):
        parse("foo(bar)")
