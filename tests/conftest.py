"""Shared fixtures"""

# tests/conftest.py
from pathlib import Path

import pytest
from pptx import Presentation

from deck2outline.internals.define_config import UserConfig


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Temporary directory for test output files"""
    output = tmp_path / "output"
    output.mkdir()
    return output


@pytest.fixture(scope="session")
def path_to_sample_xml() -> Path:
    """Path to an XML export of a five-slide deck (plus one orphaned content div)."""
    path = Path("tests/data/sample_deck.xml")
    assert path.exists(), f"Test file not found: {path}"
    return path


@pytest.fixture
def sample_config_toml() -> Path:
    """Path to test a config toml"""
    path = Path("tests/data/test_config.toml")
    assert path.exists(), f"Test file not found: {path}"
    return path


@pytest.fixture
def path_to_sample_pptx(tmp_path: Path) -> Path:
    """Build a small three-slide pptx with speaker notes, saved to a temp folder.

    Uses the "Title Only" layout so there are no empty body placeholders on the slides.
    """
    prs = Presentation()
    title_only = prs.slide_layouts[5]

    slide_specs = [
        ("Introduction", "language: en\n```caption\nWelcome!\n```"),
        ("Introduction", "```\nMore intro narration.\n```"),
        ("Wrap up", None),
    ]
    for title, notes in slide_specs:
        slide = prs.slides.add_slide(title_only)
        slide.shapes.title.text = title
        if notes is not None:
            slide.notes_slide.notes_text_frame.text = notes

    path = tmp_path / "sample_deck.pptx"
    prs.save(str(path))
    return path


@pytest.fixture
def sample_xml_cfg(path_to_sample_xml: Path, temp_output_dir: Path) -> UserConfig:
    """Sample config object for parsing the XML export"""
    return UserConfig(input_xml=path_to_sample_xml, output_folder=temp_output_dir)


@pytest.fixture
def clean_debug_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Ensure debug env var is not set before test."""
    monkeypatch.delenv("DECK2OUTLINE_DEBUG", raising=False)
    return monkeypatch
