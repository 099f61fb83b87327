"""Read raw slides straight from a pptx deck, without going through an XML export."""

# mypy: disable-error-code="import-untyped"
import logging

from pptx import presentation
from pptx.slide import Slide as Slide_pptx

from deck2outline.internals.run_context import get_parse_run_id
from deck2outline.models import Slide
from deck2outline.processing.flatten import paragraphs_to_lines

log = logging.getLogger("deck2outline")


# region slides_from_presentation
def slides_from_presentation(prs: presentation.Presentation) -> list[Slide]:
    """Build the raw slide list from every slide in the deck, in order."""
    slides = [
        Slide(content=get_content_lines(pptx_slide), note=get_note_lines(pptx_slide))
        for pptx_slide in prs.slides
    ]

    log.info(f"Read {len(slides)} slides from the pptx. [run:{get_parse_run_id()}]")
    return slides


# endregion


# region get_content_lines
def get_content_lines(pptx_slide: Slide_pptx) -> list[str]:
    """One line per paragraph, across every shape that has text. Empty shapes (like unused placeholders) are skipped."""
    lines: list[str] = []

    for shape in pptx_slide.shapes:
        if not shape.has_text_frame or not shape.text_frame.text:
            continue
        lines.extend(para.text for para in shape.text_frame.paragraphs)

    return paragraphs_to_lines(lines)


# endregion


# region get_note_lines
def get_note_lines(pptx_slide: Slide_pptx) -> list[str]:
    """One line per speaker-notes paragraph, or [] when the slide has no notes."""
    if not pptx_slide.has_notes_slide:
        return []

    notes_text_frame = pptx_slide.notes_slide.notes_text_frame
    if notes_text_frame is None:
        return []

    return paragraphs_to_lines([para.text for para in notes_text_frame.paragraphs])


# endregion
