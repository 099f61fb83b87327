"""Classify single speaker-note lines as metadata headers or block fences."""

import re
from dataclasses import dataclass
from typing import Optional

from deck2outline.internals.constants import FENCE_MARKER, METADATA_KEYS

# `key: value` with whitespace allowed around the key and before the value.
HEADER_PATTERN = re.compile(r"^\s*(?P<key>\w+)\s*:\s*(?P<value>.*)$")

# Three backticks anywhere in the line, then an optional block name. Trailing whitespace isn't part of the name.
FENCE_PATTERN = re.compile(re.escape(FENCE_MARKER) + r"\s*(?P<name>.*?)\s*$")

KEYWORD_SEPARATOR = re.compile(r"\W+")

_KEYS_BY_LOWERCASE = {key.lower(): key for key in METADATA_KEYS}


# region HeaderMatch
@dataclass(frozen=True)
class HeaderMatch:
    """A line shaped like `key: value`. `field` is the canonical metadata key, or None for an unknown key."""

    raw_key: str
    value: str
    field: Optional[str]

    @property
    def is_known(self) -> bool:
        return self.field is not None


# endregion


# region FenceMatch
@dataclass(frozen=True)
class FenceMatch:
    """A block fence line. `name` is "" for a bare fence."""

    name: str


# endregion


# region classify_header
def classify_header(line: str) -> HeaderMatch | None:
    """
    Return a HeaderMatch if the line has the `key: value` shape, otherwise None.

    The key is looked up case-insensitively; the value is kept as written.
    """
    match = HEADER_PATTERN.match(line)
    if match is None:
        return None

    raw_key = match.group("key")
    return HeaderMatch(
        raw_key=raw_key,
        value=match.group("value"),
        field=_KEYS_BY_LOWERCASE.get(raw_key.lower()),
    )


# endregion


# region classify_fence
def classify_fence(line: str) -> FenceMatch | None:
    """Return a FenceMatch if the line contains a block fence, otherwise None."""
    match = FENCE_PATTERN.search(line)
    if match is None:
        return None
    return FenceMatch(name=match.group("name"))


# endregion


# region split_keywords
def split_keywords(value: str) -> list[str]:
    """Split a keywords header value on runs of non-word characters, e.g. "cat, dog;fox" -> ["cat", "dog", "fox"]."""
    return [word for word in KEYWORD_SEPARATOR.split(value) if word]


# endregion
