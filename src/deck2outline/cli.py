"""CLI Interface Logic (argparse etc)"""

import argparse
import logging
from dataclasses import fields
from pathlib import Path

from deck2outline.internals.define_config import UserConfig
from deck2outline.orchestrator import run_pipeline

log = logging.getLogger("deck2outline")


def run() -> Path:
    """Run CLI interface. Assumes startup.initialize_application() was already called."""
    args = parse_args()
    cfg = build_config_from_args(args)
    return run_pipeline(cfg)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns argparse.Namespace with all the UserConfig fields as attributes.
    Validates that all config fields have corresponding CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="deck2outline",
        description="Parse a presentation deck's speaker notes and build a section/topic outline as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse an XML export of a deck
  deck2outline --input-xml course.xml

  # Read a pptx directly, one section per topic
  deck2outline --input-pptx course.pptx --section-per-topic

  # Use a config file, overriding its output folder
  deck2outline --config settings.toml --output-folder ./outlines
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to TOML configuration file for a run.",
    )

    inputs_group = parser.add_mutually_exclusive_group()
    inputs_group.add_argument(
        "--input-xml",
        type=str,
        dest="input_xml",
        metavar="PATH",
        help="Presentation XML export (slide-content / slide-notes divs)",
    )
    inputs_group.add_argument(
        "--input-pptx",
        type=str,
        dest="input_pptx",
        metavar="PATH",
        help="PowerPoint file (.pptx file)",
    )
    parser.add_argument(
        "--output-folder",
        type=str,
        dest="output_folder",
        metavar="PATH",
        help="Output folder for the outline JSON",
    )

    # Boolean flags - outline policy
    policy_group = parser.add_mutually_exclusive_group()
    policy_group.add_argument(
        "--section-per-topic",
        action="store_true",
        dest="section_per_topic",
        default=None,
        help="Give every topic its own unnamed section",
    )
    policy_group.add_argument(
        "--no-section-per-topic",
        action="store_false",
        dest="section_per_topic",
        default=None,
        help="Group topics under section dividers (default)",
    )

    _validate_args_match_config(parser)

    return parser.parse_args(argv)


def build_config_from_args(args: argparse.Namespace) -> UserConfig:
    """
    Build UserConfig from parsed arguments with proper priority.

    Priority order (highest to lowest):
    1. CLI arguments (if explicitly provided)
    2. Config file values (if --config provided)
    3. UserConfig defaults
    """
    if args.config:
        config_path = Path(args.config)
        log.info(f"Loading config from {config_path}")
        cfg = UserConfig.from_toml(config_path)
    else:
        cfg = UserConfig()

    # An input given on the command line replaces whichever input the config file had.
    if args.input_xml is not None:
        cfg.input_xml = Path(args.input_xml)
        cfg.input_pptx = None
    if args.input_pptx is not None:
        cfg.input_pptx = Path(args.input_pptx)
        cfg.input_xml = None
    if args.output_folder is not None:
        cfg.output_folder = Path(args.output_folder)

    # argparse leaves this None unless one of the flags was given
    if args.section_per_topic is not None:
        cfg.section_per_topic = args.section_per_topic

    cfg.validate()

    return cfg


def _validate_args_match_config(parser: argparse.ArgumentParser) -> None:
    """
    Ensure all UserConfig fields have corresponding CLI arguments, and vice versa.

    Raises:
        RuntimeError: If there's a mismatch between config fields and CLI args
    """
    config_fields = {f.name for f in fields(UserConfig)}

    excluded_args = ["help", "config"]
    arg_names = {
        action.dest for action in parser._actions if action.dest not in excluded_args
    }

    missing_in_args = config_fields - arg_names
    extra_in_args = arg_names - config_fields

    if missing_in_args:
        log.error(
            "UserConfig fields must have corresponding arg added to cli.parse_args() to ensure parity between interfaces."
        )
        raise RuntimeError(
            f"CLI arguments missing for UserConfig fields: {missing_in_args}\n"
            "These config fields need corresponding arguments added to parse_args()"
        )

    if extra_in_args:
        log.error(
            "Unexpected CLI args that do not match UserConfig fields. Either add a matching UserConfig field, "
            "or add the arg to excluded_args in _validate_args_match_config() if it is CLI-only."
        )
        raise RuntimeError(
            f"CLI arguments don't match UserConfig fields: {extra_in_args}\n"
            "Either remove these CLI args or add corresponding fields to UserConfig"
        )
