"""File I/O for deck inputs (XML exports, pptx files) and outline JSON output."""

# mypy: disable-error-code="import-untyped"
import json
import logging
from datetime import datetime
from pathlib import Path

import pptx
from pptx import presentation

from deck2outline.internals import constants
from deck2outline.internals.define_config import UserConfig
from deck2outline.internals.run_context import get_parse_run_id
from deck2outline.models import ParseResult

log = logging.getLogger("deck2outline")


# region Path Helpers
def validate_path(user_path: str | Path) -> Path:
    """Ensure filepath exists and is a file."""
    path = Path(user_path)
    run_id = get_parse_run_id()
    if not path.exists():
        log.error(f"File not found: {user_path} [run:{run_id}]")
        raise FileNotFoundError(f"File not found: {user_path}")
    if not path.is_file():
        log.error(f"Path is not a file (might be a directory): {user_path} [run:{run_id}]")
        raise ValueError(f"Path is not a file: {user_path}")
    return path


def validate_xml_path(user_path: str | Path) -> Path:
    """Validates the export filepath exists and has an XML-ish extension."""
    path = validate_path(user_path)

    if path.suffix.lower() not in {".xml", ".xhtml", ".html"}:
        log.error(
            f"Wrong file extension: expected .xml, got {path.suffix} [run:{get_parse_run_id()}]"
        )
        raise ValueError(f"Expected an .xml export, but got: {path.suffix}")
    return path


def validate_pptx_path(user_path: str | Path) -> Path:
    """Validates the deck filepath exists and is actually a pptx file."""
    path = validate_path(user_path)
    run_id = get_parse_run_id()

    if path.suffix.lower() == ".ppt":
        log.error(f"Unsupported .ppt file: {path} [run:{run_id}]")
        raise ValueError(
            "This tool only supports .pptx files right now. Please convert your .ppt file to .pptx format first."
        )
    if path.suffix.lower() != ".pptx":
        log.error(f"Wrong file extension: expected .pptx, got {path.suffix} [run:{run_id}]")
        raise ValueError(f"Expected a .pptx file, but got: {path.suffix}")
    return path


def _build_timestamped_output_filename() -> str:
    """Apply a per-run timestamp to the output's base filename."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    name, ext = constants.OUTPUT_JSON_FILENAME.rsplit(".", 1)
    return f"{name}_{timestamp}.{ext}"


# endregion


# region Disk I/O - Read
def load_xml_text(xml_path: Path | str) -> str:
    """Read an XML export as text."""
    path = validate_xml_path(xml_path)
    try:
        xml_text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        log.error(f"Could not decode {path} as UTF-8 [run:{get_parse_run_id()}]: {e}")
        raise ValueError(f"Export is not valid UTF-8 text: {e}") from e

    if not xml_text.strip():
        log.error(f"Export {path} is empty [run:{get_parse_run_id()}]")
        raise ValueError("Export file is empty, so there's nothing for the pipeline to do.")

    return xml_text


def load_and_validate_pptx(pptx_path: Path | str) -> presentation.Presentation:
    """Read in a pptx file and make sure it has at least one slide."""
    path = validate_pptx_path(pptx_path)
    run_id = get_parse_run_id()

    try:
        prs = pptx.Presentation(str(path))
    except Exception as e:
        log.error(f"Could not load PowerPoint file {path} [run:{run_id}]. Error: {e}")
        raise ValueError(f"Presentation appears to be corrupted: {e}") from e

    if not prs.slides:
        log.error(f"Document {path} contains no slides. [run:{run_id}]")
        raise ValueError("Presentation contains no slides.")

    log.info(f"The pptx file {path} has {len(prs.slides)} slide(s) in it. [run:{run_id}]")
    return prs


# endregion


# region Disk I/O - Write
def save_outline(result: ParseResult, cfg: UserConfig) -> Path:
    """Write the parse result to a timestamped JSON file in the configured output folder."""
    run_id = get_parse_run_id()

    save_folder = cfg.get_output_folder()
    save_folder.mkdir(parents=True, exist_ok=True)
    output_filepath = save_folder / _build_timestamped_output_filename()

    try:
        with open(output_filepath, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
        log.info(f"Successfully saved to {output_filepath}. [run:{run_id}]")
    except PermissionError as e:
        log.error(f"Save failed due to permission error [run:{run_id}]: {e}")
        raise PermissionError("Save failed: File may be open in another program") from e
    except OSError as e:
        log.error(f"Save failed in [run:{run_id}]: {e}")
        raise OSError(f"Save failed (disk space or IO issue): {e}") from e

    return output_filepath


# endregion
