"""Turn a slide's speaker notes into metadata fields, keywords, and fenced content blocks.

Notes look like this:

    language: en
    voice: Joanna
    keywords: intro, welcome

    ```caption
    Welcome to the course
    ```
    ```
    Narration text goes here.
    ```

Leading `key: value` lines are the header. The first non-empty line that isn't a header ends
the header for good. After that, only lines inside a fenced block are kept.
"""

import dataclasses
import logging
from dataclasses import dataclass

from deck2outline.internals.constants import (
    DEFAULT_BLOCK_TYPE,
    KEYWORDS_KEY,
    METADATA_FIELD_NAMES,
)
from deck2outline.models import Block, Slide
from deck2outline.processing.line_classifiers import (
    FenceMatch,
    HeaderMatch,
    classify_fence,
    classify_header,
    split_keywords,
)

log = logging.getLogger("deck2outline")


# region block states
@dataclass(frozen=True)
class NoBlock:
    """Between blocks: lines here have nowhere to go."""


@dataclass(frozen=True)
class InBlock:
    """Accumulating lines into an open block."""

    block: Block


BlockState = NoBlock | InBlock
# endregion


# region parse_notes
def parse_notes(slides: list[Slide]) -> list[Slide]:
    """Parse the notes of every slide in a deck. Slides are independent of each other."""
    return [parse_note(slide) for slide in slides]


# endregion


# region parse_note
def parse_note(slide: Slide) -> Slide:
    """
    Return a copy of the slide with metadata, keywords, and blocks parsed from its notes.

    The input slide is left untouched, so parsing the same slide twice gives the same result.
    """
    updates: dict[str, object] = {}
    blocks: list[Block] = []

    in_header = True
    state: BlockState = NoBlock()

    for line in slide.note:
        if in_header:
            header = classify_header(line)
            if header is not None:
                _apply_header(header, updates)
            elif line:
                in_header = False

        state = _step_block_state(state, line, blocks)

    return dataclasses.replace(slide, blocks=blocks, **updates)


# endregion


# region _apply_header
def _apply_header(header: HeaderMatch, updates: dict[str, object]) -> None:
    """Record a header line's value under its Slide attribute. Unknown keys are ignored."""
    if not header.is_known:
        log.debug(f"Ignoring unknown note header key '{header.raw_key}'.")
        return

    if header.field == KEYWORDS_KEY:
        updates["keywords"] = split_keywords(header.value)
    else:
        updates[METADATA_FIELD_NAMES[header.field]] = header.value


# endregion


# region _step_block_state
def _step_block_state(state: BlockState, line: str, blocks: list[Block]) -> BlockState:
    """Feed one line to the block state machine and return the next state."""
    fence = classify_fence(line)

    if isinstance(state, InBlock):
        if fence is None:
            state.block.add_line(line)
            return state
        # Closing fence; its name (if any) doesn't matter.
        return NoBlock()

    if fence is None:
        # Outside the header and outside any block: dropped.
        return state

    block = _open_block(fence)
    blocks.append(block)
    return InBlock(block)


# endregion


# region _open_block
def _open_block(fence: FenceMatch) -> Block:
    """Create the block an opening fence asks for, warning on types we don't know."""
    block = Block(type=fence.name or DEFAULT_BLOCK_TYPE)
    if not block.is_known_type:
        log.warning(f"unknown block type {block.type}")
    return block


# endregion
