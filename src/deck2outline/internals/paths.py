"""Cross-platform path resolution for user directories.

Uses platformdirs to find OS-appropriate locations for:
- Logs (where deck2outline.log lives)
- Output (default save location for outline JSON files)
"""

import os
from pathlib import Path

from platformdirs import user_documents_dir

PACKAGE_NAME = "deck2outline"


# region user_base_dir
def user_base_dir() -> Path:
    """
    Base directory for all deck2outline user files.

    Returns:
        Path to ~/Documents/deck2outline/ (or OS equivalent)
    """
    base = Path(user_documents_dir()) / PACKAGE_NAME
    base.mkdir(parents=True, exist_ok=True)
    return base


# endregion


# region user_log_dir_path
def user_log_dir_path() -> Path:
    """Directory for log files: ~/Documents/deck2outline/logs/"""
    log_dir = user_base_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


# endregion


# region user_output_dir
def user_output_dir() -> Path:
    """Default output directory for outline files: ~/Documents/deck2outline/output/"""
    output_dir = user_base_dir() / "output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


# endregion


# region resolve_path
def resolve_path(raw: str | Path) -> Path:
    """
    Expand ~ and ${VARS}; resolve to absolute path.

    Relative paths resolve relative to current working directory.
    """
    expanded = os.path.expandvars(str(raw))
    return Path(expanded).expanduser().resolve()


# endregion


# region normalize_path
def normalize_path(path_str: str | None) -> str | None:
    """Use forward slashes so paths survive TOML escaping on every platform."""
    return path_str.replace("\\", "/") if path_str else None


# endregion
