"""Tests for the UserConfig class and related items"""

import logging
from pathlib import Path

import pytest

from deck2outline.internals.define_config import InputFormat, UserConfig


# region from_toml tests
def test_from_toml_loads_sample_config(sample_config_toml: Path) -> None:
    cfg = UserConfig.from_toml(sample_config_toml)

    assert cfg.input_xml == Path("./tests/data/sample_deck.xml")
    assert cfg.section_per_topic is True
    assert cfg.input_format == InputFormat.XML


def test_from_toml_missing_file_raises(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        UserConfig.from_toml(tmp_path / "nope.toml")
    assert "Config file not found" in caplog.text


def test_from_toml_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="directory"):
        UserConfig.from_toml(tmp_path)


def test_from_toml_invalid_syntax_raises(tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text('input_xml = "unterminated\n', encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML syntax"):
        UserConfig.from_toml(bad)


def test_from_toml_empty_file_warns_and_uses_defaults(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    empty = tmp_path / "empty.toml"
    empty.write_text("", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="deck2outline"):
        cfg = UserConfig.from_toml(empty)

    assert cfg == UserConfig()
    assert "loaded as empty" in caplog.text


def test_from_toml_ignores_unknown_keys(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "typo.toml"
    path.write_text("section_per_topc = true\nsection_per_topic = true\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="deck2outline"):
        cfg = UserConfig.from_toml(path)

    assert cfg.section_per_topic is True
    assert "section_per_topc" in caplog.text


# endregion


# region save_toml tests
def test_save_toml_then_load_gives_same_config(tmp_path: Path) -> None:
    cfg = UserConfig(
        input_pptx=tmp_path / "deck.pptx",
        output_folder=tmp_path / "out",
        section_per_topic=True,
    )
    path = tmp_path / "configs" / "saved.toml"

    cfg.save_toml(path)
    loaded = UserConfig.from_toml(path)

    assert loaded.section_per_topic is True
    assert loaded.input_xml is None
    assert loaded.get_input_file() == cfg.get_input_file()
    assert loaded.get_output_folder() == cfg.get_output_folder()


def test_save_toml_omits_none_values(tmp_path: Path) -> None:
    path = tmp_path / "defaults.toml"
    UserConfig().save_toml(path)

    text = path.read_text(encoding="utf-8")
    assert "section_per_topic = false" in text
    assert "input_xml" not in text


def test_save_toml_to_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="directory"):
        UserConfig().save_toml(tmp_path)


# endregion


# region input_format tests
def test_input_format_pptx(tmp_path: Path) -> None:
    assert UserConfig(input_pptx=tmp_path / "a.pptx").input_format == InputFormat.PPTX


def test_input_format_requires_exactly_one_input(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="no input file"):
        _ = UserConfig().input_format

    with pytest.raises(ValueError, match="too many inputs"):
        _ = UserConfig(input_xml=tmp_path / "a.xml", input_pptx=tmp_path / "a.pptx").input_format


# endregion


# region validate tests
def test_validate_accepts_defaults() -> None:
    UserConfig().validate()


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"section_per_topic": "yes"}, "section_per_topic must be a boolean"),
        ({"input_xml": 42}, "input_xml must be a path"),
        ({"output_folder": ""}, "output_folder cannot be empty"),
    ],
)
def test_validate_rejects_bad_values(kwargs: dict, message: str) -> None:
    cfg = UserConfig()
    for name, value in kwargs.items():
        setattr(cfg, name, value)

    with pytest.raises(ValueError, match=message):
        cfg.validate()


def test_validate_pipeline_requirements_missing_input(tmp_path: Path) -> None:
    cfg = UserConfig(input_xml=tmp_path / "missing.xml", output_folder=tmp_path)
    with pytest.raises(FileNotFoundError, match="Input file not found"):
        cfg.validate_pipeline_requirements()


def test_validate_pipeline_requirements_output_is_a_file(tmp_path: Path) -> None:
    deck = tmp_path / "deck.xml"
    deck.write_text("<html/>", encoding="utf-8")
    not_a_folder = tmp_path / "out.txt"
    not_a_folder.write_text("", encoding="utf-8")

    cfg = UserConfig(input_xml=deck, output_folder=not_a_folder)
    with pytest.raises(ValueError, match="not a directory"):
        cfg.validate_pipeline_requirements()


# endregion
