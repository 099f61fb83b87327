"""Run a deck through the parser: raw slides -> parsed notes -> outline -> result."""

import logging
from pathlib import Path
from typing import Any, Optional

from deck2outline import io
from deck2outline.internals.define_config import InputFormat, UserConfig
from deck2outline.internals.paths import user_log_dir_path
from deck2outline.internals.run_context import (
    get_parse_run_id,
    get_session_id,
    start_parse_run,
)
from deck2outline.models import ParseResult, Slide
from deck2outline.processing.flatten import slides_from_tree, xml_to_tree
from deck2outline.processing.note_parser import parse_notes
from deck2outline.processing.outline import build_outline
from deck2outline.processing.pptx_reader import slides_from_presentation

log = logging.getLogger("deck2outline")


# region parse
def parse(xml_text: str | bytes, section_per_topic: bool = False) -> ParseResult:
    """Parse a presentation XML export into slides and a section/topic outline."""
    tree = xml_to_tree(xml_text)
    return parse_deck(slides_from_tree(tree), tree=tree, section_per_topic=section_per_topic)


# endregion


# region parse_deck
def parse_deck(
    raw_slides: list[Slide],
    tree: Optional[dict[str, Any]] = None,
    section_per_topic: bool = False,
) -> ParseResult:
    """Parse every slide's notes, build the outline, and package it all up."""
    slides = parse_notes(raw_slides)
    sections = build_outline(slides, section_per_topic=section_per_topic)
    return ParseResult(tree=tree, slides=slides, sections=sections)


# endregion


# region run_pipeline
def run_pipeline(cfg: UserConfig) -> Path:
    """Validate the config, parse the configured deck, and save the outline JSON. Returns the saved path."""

    cfg.pre_run_check()

    run_id = start_parse_run()
    log.info(f"Initializing parse run. [run:{run_id}]")
    log_pipeline_info(cfg)

    input_path = cfg.get_input_file()

    if cfg.input_format == InputFormat.XML:
        result = parse(io.load_xml_text(input_path), cfg.section_per_topic)
    else:
        prs = io.load_and_validate_pptx(input_path)
        result = parse_deck(
            slides_from_presentation(prs), section_per_topic=cfg.section_per_topic
        )

    log.info(
        f"Parsed {len(result.slides)} slides into {len(result.sections)} sections "
        f"and {result.topic_count} topics. [run:{run_id}]"
    )

    saved_output_path = io.save_outline(result, cfg)

    log.info(f"Parse run complete [run:{run_id}]")
    log.info(f"  Original: {input_path}")
    log.info(f"  -> Outline:  {saved_output_path}")
    log.info(f"See log: {user_log_dir_path()}")
    return saved_output_path


# endregion


# region log_pipeline_info
def log_pipeline_info(cfg: UserConfig) -> None:
    """Write this run's IDs and general config info to the log."""
    log.info("=== Parse Run Started ===")
    log.info(f"Run ID: {get_parse_run_id()}")
    log.info(f"Session ID: {get_session_id()}")
    log.info(f"Input format: {cfg.input_format.value}")
    log.info(f"Configuration: {cfg}")


# endregion
