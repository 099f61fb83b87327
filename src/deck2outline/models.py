# models.py
"""Data models for slides, their note blocks, and the section/topic outline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from deck2outline.internals.constants import BLOCK_TYPES, METADATA_FIELD_NAMES


# region Block
@dataclass
class Block:
    """A fenced chunk of speaker notes, e.g. narration text, a caption, or a description."""

    type: str
    content: list[str] = field(default_factory=list)

    @property
    def is_known_type(self) -> bool:
        """True if this block's type is one of the supported block types."""
        return self.type in BLOCK_TYPES

    def add_line(self, line: str) -> None:
        """Append a raw notes line to this block."""
        self.content.append(line)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": list(self.content)}


# endregion


# region Slide
@dataclass
class Slide:
    """
    One presentation slide.

    `content` and `note` are the raw text lines from the deck. Everything else is filled
    in by the note parser. Metadata attributes are None when the notes didn't set them.
    """

    content: list[str] = field(default_factory=list)
    note: list[str] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)

    # Note header metadata
    delay: Optional[str] = None
    pad: Optional[str] = None
    fade: Optional[str] = None
    language: Optional[str] = None
    voice: Optional[str] = None
    sample_rate: Optional[str] = None
    section: Optional[str] = None
    topic: Optional[str] = None
    license: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    keywords: Optional[list[str]] = None

    @property
    def metadata(self) -> dict[str, str]:
        """Metadata fields that are set, keyed by their canonical note-header spelling (e.g. "sampleRate")."""
        found: dict[str, str] = {}
        for key, attr in METADATA_FIELD_NAMES.items():
            value = getattr(self, attr)
            if value is not None:
                found[key] = value
        return found

    @property
    def first_line(self) -> str:
        """The first content line, or an empty string for a slide with no content."""
        return self.content[0] if self.content else ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "content": list(self.content),
            "note": list(self.note),
            "blocks": [block.to_dict() for block in self.blocks],
        }
        data.update(self.metadata)
        if self.keywords is not None:
            data["keywords"] = list(self.keywords)
        return data


# endregion


# region Topic
@dataclass
class Topic:
    """Consecutive slides sharing a topic name, inside one section."""

    name: str
    slides: list[Slide] = field(default_factory=list)

    @classmethod
    def create_with_slide(cls, name: str, slide: Slide) -> "Topic":
        """Create a new Topic seeded with its first slide."""
        return cls(name=name, slides=[slide])

    def add_slide(self, slide: Slide) -> None:
        self.slides.append(slide)


# endregion


# region Section
@dataclass
class Section:
    """A named group of topics."""

    name: str
    topics: list[Topic] = field(default_factory=list)

    def add_topic(self, topic: Topic) -> None:
        self.topics.append(topic)

    @property
    def slides(self) -> list[Slide]:
        """Every slide in this section, in deck order."""
        return [slide for topic in self.topics for slide in topic.slides]


# endregion


# region ParseResult
@dataclass
class ParseResult:
    """
    Everything the parser produces for one deck.

    `tree` is the raw object tree built from the XML export, passed through untouched
    (None when the deck was read straight from a pptx file).
    """

    tree: Optional[dict[str, Any]]
    slides: list[Slide] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    @property
    def topic_count(self) -> int:
        return sum(len(section.topics) for section in self.sections)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize for JSON output. Sections refer to slides by their index in `slides`
        so the outline doesn't repeat every slide body.
        """
        index_of = {id(slide): i for i, slide in enumerate(self.slides)}
        return {
            "tree": self.tree,
            "slides": [slide.to_dict() for slide in self.slides],
            "sections": [
                {
                    "name": section.name,
                    "topics": [
                        {
                            "name": topic.name,
                            "slides": [index_of[id(slide)] for slide in topic.slides],
                        }
                        for topic in section.topics
                    ],
                }
                for section in self.sections
            ],
        }


# endregion
