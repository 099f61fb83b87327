"""Turn a presentation XML export into a flat list of raw slides.

The export is an XHTML document where every slide is a `slide-content` div followed by a
`slide-notes` div, each holding one `<p>` per line:

    <html><body>
      <div class="slide-content"><p>Intro</p></div>
      <div class="slide-notes"><p>language: en</p></div>
      ...
    </body></html>
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any

from deck2outline.internals.constants import SLIDE_CONTENT_CLASS, SLIDE_NOTES_CLASS
from deck2outline.internals.run_context import get_parse_run_id
from deck2outline.models import Slide

log = logging.getLogger("deck2outline")

# Key that holds an element's text when the element also has attributes or children
TEXT_KEY = "_"


# region xml_to_tree
def xml_to_tree(xml_text: str | bytes) -> dict[str, Any]:
    """
    Parse XML text into nested dicts keyed by tag name, e.g. {"html": {"body": {"div": [...]}}}.

    Bytes are handed to the parser as-is, so the document's own `encoding=` declaration
    decides how they are decoded (UTF-8 when there is none).

    Raises:
        ValueError: If the XML is malformed or its bytes don't match its encoding
    """
    try:
        root: ET.Element = ET.fromstring(xml_text)
    except ET.ParseError as e:
        log.error(f"Malformed XML export: {e}")
        raise ValueError(f"XML is malformed: {e}") from e

    return {_local_name(root.tag): _element_to_object(root)}


def _local_name(tag: str) -> str:
    """Drop the `{namespace}` prefix ElementTree puts on tag and attribute names."""
    return tag.rsplit("}", 1)[-1]


def _element_to_object(element: ET.Element) -> Any:
    """
    Convert one element.

    A bare text element becomes its string, verbatim ("" when empty). Anything with
    attributes or children becomes a dict: attributes and children share the dict, repeated
    child tags collect into a list, and the element's own text (if not just whitespace)
    sits under TEXT_KEY.
    """
    text = (element.text or "") + "".join(child.tail or "" for child in element)

    if not element.attrib and len(element) == 0:
        return text

    obj: dict[str, Any] = {}
    for name, value in element.attrib.items():
        obj[_local_name(name)] = value

    for child in element:
        tag = _local_name(child.tag)
        value = _element_to_object(child)
        if tag not in obj:
            obj[tag] = value
        elif isinstance(obj[tag], list):
            obj[tag].append(value)
        else:
            obj[tag] = [obj[tag], value]

    if text.strip():
        obj[TEXT_KEY] = text

    return obj


# endregion


# region paragraphs_to_lines
def paragraphs_to_lines(paragraphs: Any) -> list[str]:
    """
    Convert a div's `p` entry to text lines.

    Missing paragraphs give []. Paragraphs that aren't plain text (e.g. they carry
    attributes or markup) become "". If no line has any text at all, the result
    collapses to [] so a blank slide doesn't look like a slide with blank lines.
    """
    lines = [p if isinstance(p, str) else "" for p in _as_list(paragraphs)]

    if sum(len(line) for line in lines) == 0:
        return []
    return lines


def _as_list(value: Any) -> list[Any]:
    """A single child comes out of the tree as a scalar; treat it as a one-item list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


# endregion


# region slides_from_tree
def slides_from_tree(tree: dict[str, Any]) -> list[Slide]:
    """
    Build the raw slide list from a parsed export tree.

    A slide is finished by its `slide-notes` div and takes the lines of the most recent
    `slide-content` div. A content div that never gets a notes div is dropped.
    """
    html = tree.get("html")
    body = html.get("body") if isinstance(html, dict) else None
    divs = _as_list(body.get("div")) if isinstance(body, dict) else []

    slides: list[Slide] = []
    content: list[str] = []

    for div in divs:
        if not isinstance(div, dict):
            continue

        div_class = div.get("class")
        if div_class == SLIDE_CONTENT_CLASS:
            content = paragraphs_to_lines(div.get("p"))
        elif div_class == SLIDE_NOTES_CLASS:
            slides.append(
                Slide(content=list(content), note=paragraphs_to_lines(div.get("p")))
            )

    log.info(f"Found {len(slides)} slides in the export. [run:{get_parse_run_id()}]")
    return slides


# endregion
