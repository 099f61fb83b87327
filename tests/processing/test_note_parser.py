"""Tests for speaker-note parsing: header metadata, keywords, and fenced blocks."""

import logging

import pytest

from deck2outline.models import Block, Slide
from deck2outline.processing.note_parser import parse_note, parse_notes


def _parse(*note_lines: str) -> Slide:
    """Parse a slide that has only the given note lines."""
    return parse_note(Slide(content=["Title"], note=list(note_lines)))


# region header metadata
def test_header_only_notes_set_metadata_and_no_blocks() -> None:
    """Header lines set their fields; none of them is a fence, so no block opens."""
    slide = _parse("language: en", "voice: Joanna")

    assert slide.language == "en"
    assert slide.voice == "Joanna"
    assert slide.blocks == []


def test_keywords_header_is_split_into_list() -> None:
    slide = _parse("keywords: cat, dog;fox")
    assert slide.keywords == ["cat", "dog", "fox"]


def test_header_keys_match_case_insensitively_and_values_keep_case() -> None:
    slide = _parse("SampleRATE: 22050", "CREATEDAT: Yesterday", "Section: Part ONE")

    assert slide.sample_rate == "22050"
    assert slide.created_at == "Yesterday"
    assert slide.section == "Part ONE"
    assert slide.metadata == {
        "sampleRate": "22050",
        "createdAt": "Yesterday",
        "section": "Part ONE",
    }


def test_unknown_header_key_sets_nothing_and_keeps_header_open() -> None:
    """An unknown key is swallowed, and later header lines still count."""
    slide = _parse("author: Someone", "voice: Joanna")

    assert slide.voice == "Joanna"
    assert slide.metadata == {"voice": "Joanna"}


def test_blank_lines_do_not_end_header() -> None:
    slide = _parse("language: en", "", "", "voice: Matthew")
    assert slide.language == "en"
    assert slide.voice == "Matthew"


def test_non_header_line_ends_header_permanently_and_is_discarded() -> None:
    """'hello' ends the header. It isn't a fence, so it's dropped; later `key: value` lines are ignored."""
    slide = _parse("hello", "language: en")

    assert slide.language is None
    assert slide.metadata == {}
    assert slide.blocks == []


def test_header_line_inside_block_after_header_is_content() -> None:
    """Once the header has ended, `key: value` lines inside a block are just content."""
    slide = _parse("voice: Joanna", "```", "voice: Matthew", "```")

    assert slide.voice == "Joanna"
    assert slide.blocks == [Block(type="text", content=["voice: Matthew"])]


# endregion


# region blocks
def test_named_fence_opens_block_of_that_type() -> None:
    slide = _parse("```caption", "Hi", "```")
    assert slide.blocks == [Block(type="caption", content=["Hi"])]


def test_unnamed_fence_defaults_to_text_block() -> None:
    slide = _parse("```", "line1", "```")
    assert slide.blocks == [Block(type="text", content=["line1"])]


def test_fence_lines_are_not_part_of_block_content() -> None:
    slide = _parse("```description", "a", "b", "```", "```caption", "c", "```")

    for block in slide.blocks:
        assert not any("```" in line for line in block.content)
    assert [b.content for b in slide.blocks] == [["a", "b"], ["c"]]


def test_block_content_is_verbatim_including_blank_lines() -> None:
    slide = _parse("```", "  indented  ", "", "after blank", "```")
    assert slide.blocks[0].content == ["  indented  ", "", "after blank"]


def test_lines_between_blocks_are_discarded() -> None:
    slide = _parse("```", "kept", "```", "dropped", "```caption", "also kept", "```")

    assert slide.blocks == [
        Block(type="text", content=["kept"]),
        Block(type="caption", content=["also kept"]),
    ]


def test_closing_fence_name_is_ignored() -> None:
    """A named fence inside an open block simply closes it."""
    slide = _parse("```caption", "Hi", "```description", "outside")
    assert slide.blocks == [Block(type="caption", content=["Hi"])]


def test_unclosed_block_is_kept() -> None:
    slide = _parse("```text", "never closed", "still going")
    assert slide.blocks == [Block(type="text", content=["never closed", "still going"])]


def test_unknown_block_type_is_kept_and_warns_once(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="deck2outline"):
        slide = _parse("```foo", "bar", "```")

    assert slide.blocks == [Block(type="foo", content=["bar"])]
    assert not slide.blocks[0].is_known_type

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "foo" in warnings[0].getMessage()


def test_known_block_types_do_not_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="deck2outline"):
        _parse("```description", "x", "```", "```caption", "y", "```", "```", "z", "```")

    assert not [r for r in caplog.records if r.levelno == logging.WARNING]


def test_each_unknown_block_warns_separately(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="deck2outline"):
        _parse("```foo", "```", "```foo", "```", "```bar", "```")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 3


def test_fence_after_header_opens_block() -> None:
    """The fence line that ends the header is reprocessed as a block line, not skipped."""
    slide = _parse("language: en", "```caption", "Hi", "```")

    assert slide.language == "en"
    assert slide.blocks == [Block(type="caption", content=["Hi"])]


def test_header_line_with_fence_opens_block_and_sets_metadata() -> None:
    """A fence on a header line still opens a block, and later header lines land in it."""
    slide = _parse("note: ```caption", "language: en", "```")

    assert slide.language == "en"
    assert slide.blocks == [Block(type="caption", content=["language: en"])]


# endregion


# region purity
def test_parse_note_does_not_mutate_input() -> None:
    raw = Slide(content=["Title"], note=["voice: Joanna", "```", "x", "```"])

    parsed = parse_note(raw)

    assert raw.voice is None
    assert raw.blocks == []
    assert parsed is not raw
    assert parsed.note == raw.note


def test_parse_note_is_repeatable_on_same_input() -> None:
    raw = Slide(content=["Title"], note=["```", "x", "```"])
    assert parse_note(raw) == parse_note(raw)


def test_empty_notes_produce_bare_slide() -> None:
    slide = parse_note(Slide(content=["Title"], note=[]))

    assert slide.blocks == []
    assert slide.metadata == {}
    assert slide.keywords is None


def test_parse_notes_keeps_deck_order() -> None:
    raw = [
        Slide(content=["A"], note=["voice: one"]),
        Slide(content=["B"], note=["voice: two"]),
    ]

    parsed = parse_notes(raw)

    assert [s.voice for s in parsed] == ["one", "two"]
    assert [s.content for s in parsed] == [["A"], ["B"]]


# endregion
