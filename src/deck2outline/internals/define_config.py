"""User configuration dataclass and validation."""

# region imports
from __future__ import annotations

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    # Python 3.10
    import tomli as tomllib  # type: ignore[no-redef]

import logging
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import tomli_w  # For writing (no stdlib equivalent yet)

from deck2outline.internals.paths import normalize_path, resolve_path, user_output_dir

# endregion

log = logging.getLogger("deck2outline")


# region Enums
class InputFormat(Enum):
    """Which kind of deck file we're reading."""

    XML = "xml"  # Presentation XML export (slide-content / slide-notes divs)
    PPTX = "pptx"


# endregion


# region class UserConfig
@dataclass
class UserConfig:
    """All user-configurable settings for deck2outline."""

    # region class fields
    input_xml: Optional[Path] = None
    input_pptx: Optional[Path] = None

    output_folder: Optional[Path] = None  # Where the outline JSON is saved

    # Give every topic its own unnamed section instead of grouping topics under section dividers
    section_per_topic: bool = False
    # endregion

    # region post_init
    def __post_init__(self) -> None:
        """Convert string inputs of path fields into Path objects."""
        if self.input_xml is not None:
            self.input_xml = Path(self.input_xml)
        if self.input_pptx is not None:
            self.input_pptx = Path(self.input_pptx)
        if self.output_folder is not None and self.output_folder != "":
            self.output_folder = Path(self.output_folder)

    # endregion

    # region from_toml
    @classmethod
    def from_toml(cls, path: Path) -> UserConfig:
        """
        Load configuration from a TOML file.

        The TOML file should have flat key-value pairs matching the UserConfig field names.

        Example TOML:
            input_xml = "~/decks/course.xml"
            output_folder = "~/outlines"
            section_per_topic = true

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the path is a folder or the TOML is invalid
        """
        path = Path(path)
        if not path.exists():
            error_msg = f"Config file not found: {path}"
            log.error(error_msg)
            raise FileNotFoundError(error_msg)
        if path.is_dir():
            error_msg = f"This is a directory (folder), not a toml file: {path}"
            log.error(error_msg)
            raise ValueError(error_msg)

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            error_msg = f"Invalid TOML syntax in {path}. Check for missing or mismatched quote marks."
            log.error(error_msg)
            raise ValueError(error_msg) from e
        except PermissionError as e:
            error_msg = f"We hit a permission error when trying to access {path}"
            log.error(error_msg)
            raise ValueError(error_msg) from e

        # Empty is allowed; warn and keep going with defaults.
        if not data:
            log.warning(
                f"Config toml file loaded as empty, so no UserConfig fields were set from: {path}."
            )

        valid_fields = {f.name for f in fields(cls)}
        unexpected = set(data.keys()) - valid_fields

        if unexpected:
            log.warning(
                f"Ignoring unexpected fields in TOML config: {', '.join(sorted(unexpected))}. "
                f"Check for typos. Valid fields: {', '.join(sorted(valid_fields))}"
            )
            data = {k: v for k, v in data.items() if k in valid_fields}

        return cls(**data)

    # endregion

    # region input_format property
    @property
    def input_format(self) -> InputFormat:
        """Input format inferred from which input file is set."""
        if self.input_xml and self.input_pptx:
            log.error(
                "Both input_xml and input_pptx were provided. Only 1 input can be specified per run."
            )
            raise ValueError("Cannot determine input format: too many inputs provided")
        elif self.input_xml:
            return InputFormat.XML
        elif self.input_pptx:
            return InputFormat.PPTX
        else:
            log.error(
                "There was no input_xml or input_pptx path provided. You must provide one."
            )
            raise ValueError("Cannot determine input format: no input file specified")

    # endregion

    # region path getters
    def get_input_file(self) -> Path:
        """Get the resolved input file path for whichever input is set."""
        if self.input_format == InputFormat.XML:
            return resolve_path(self.input_xml)  # type: ignore[arg-type]
        return resolve_path(self.input_pptx)  # type: ignore[arg-type]

    def get_output_folder(self) -> Path:
        """Get the output folder, with fallback to default."""
        if self.output_folder:
            return resolve_path(self.output_folder)

        return user_output_dir()

    # endregion

    # region save_toml
    def save_toml(self, path: Path) -> None:
        """Save configuration to a TOML file."""
        path = Path(path)

        if path.exists() and path.is_dir():
            error_msg = f"Cannot save config: path is a directory, not a file: {path}."
            log.error(error_msg)
            raise ValueError(error_msg)

        path.parent.mkdir(parents=True, exist_ok=True)

        # TOML can't serialize None
        data = {k: v for k, v in self.config_to_dict().items() if v is not None}
        log.debug(f"Data to be written to toml file is: \n{data}")

        try:
            with open(path, "wb") as f:
                tomli_w.dump(data, f)
            log.info(f"Saved toml config file at {path}")
        except PermissionError as e:
            error_msg = f"Permission denied writing to: {path}"
            log.error(error_msg)
            raise PermissionError(error_msg) from e
        except OSError as e:
            error_msg = f"Failed to write config file to {path}"
            log.error(error_msg)
            raise OSError(error_msg) from e

    # endregion

    # region config_to_dict
    def config_to_dict(self) -> dict[str, Any]:
        """Plain dict of every field, with paths as forward-slash strings."""
        return {
            "input_xml": normalize_path(str(self.input_xml)) if self.input_xml else None,
            "input_pptx": normalize_path(str(self.input_pptx)) if self.input_pptx else None,
            "output_folder": (
                normalize_path(str(self.output_folder)) if self.output_folder else None
            ),
            "section_per_topic": self.section_per_topic,
        }

    # endregion

    # region validate
    def validate(self) -> None:
        """
        Validate intrinsic config values (no filesystem access).

        Catches someone passing the wrong types, or an empty string where None is expected.
        """
        if not isinstance(self.section_per_topic, bool):
            raise ValueError(
                f"section_per_topic must be a boolean, got {type(self.section_per_topic).__name__}"
            )

        for field_name in ("input_xml", "input_pptx", "output_folder"):
            val = getattr(self, field_name)
            if val is not None and not isinstance(val, (str, Path)):
                raise ValueError(
                    f"{field_name} must be a path, got {type(val).__name__}"
                )

        if self.output_folder == "":
            raise ValueError("output_folder cannot be empty string; use None for default")

    # endregion

    # region validate_pipeline_requirements
    def validate_pipeline_requirements(self) -> None:
        """
        Check external state right before a run: the input file exists and is a file,
        and the output folder isn't something else.
        """
        input_path = self.get_input_file()

        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_path}")
        if not input_path.is_file():
            raise ValueError(f"Input path is not a file: {input_path}")

        output_folder = self.get_output_folder()
        if output_folder.exists() and not output_folder.is_dir():
            raise ValueError(
                f"Output path exists but is not a directory: {output_folder}"
            )

    # endregion

    # region pre_run_check
    def pre_run_check(self) -> None:
        """Run both the intrinsic and the filesystem checks."""
        self.validate()
        self.validate_pipeline_requirements()

    # endregion


# endregion
