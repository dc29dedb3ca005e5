# topmark:header:start
#
#   project      : ColorFormat
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration discovery, layering and TOML serialization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from colorformat.config.loaders import (
    build_config,
    load_config,
    load_pyproject_table,
    load_toml_dict,
    to_toml,
)
from colorformat.config.model import Config, ConfigError, MutableConfig
from colorformat.scanner.signs import DEFAULT_SIGNS, SignConfigError, Signs

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_without_files(tmp_path: Path) -> None:
    """An empty directory yields the built-in defaults."""
    config = load_config(cwd=tmp_path)

    assert config.signs == DEFAULT_SIGNS
    assert config.restore_defaults is True
    assert config.newline is True
    assert config.sources == ("defaults",)


def test_pyproject_section_is_merged(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.colorformat]\nnewline = false\n\n'
        '[tool.colorformat.signs]\nfore = "^"\n',
        encoding="utf-8",
    )

    config = load_config(cwd=tmp_path)

    assert config.newline is False
    assert config.signs.fore == "^"
    assert config.sources == ("defaults", str(tmp_path / "pyproject.toml"))


def test_pyproject_without_section_is_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert load_config(cwd=tmp_path).sources == ("defaults",)


def test_local_file_overrides_pyproject(tmp_path: Path) -> None:
    """``colorformat.toml`` is merged after ``[tool.colorformat]``."""
    (tmp_path / "pyproject.toml").write_text(
        "[tool.colorformat]\nrestore_defaults = false\nnewline = false\n", encoding="utf-8"
    )
    (tmp_path / "colorformat.toml").write_text("newline = true\n", encoding="utf-8")

    config = load_config(cwd=tmp_path)

    assert config.restore_defaults is False
    assert config.newline is True
    assert len(config.sources) == 3


def test_explicit_file_is_merged_last(tmp_path: Path) -> None:
    (tmp_path / "colorformat.toml").write_text('[signs]\nstop = "|"\n', encoding="utf-8")
    extra: Path = tmp_path / "extra.toml"
    extra.write_text('[signs]\nstop = "!"\n', encoding="utf-8")

    config = load_config(cwd=tmp_path, config_file=extra)

    assert config.signs.stop == "!"
    assert config.sources[-1] == str(extra)


def test_no_discovery_ignores_working_directory(tmp_path: Path) -> None:
    (tmp_path / "colorformat.toml").write_text("newline = false\n", encoding="utf-8")

    config = load_config(cwd=tmp_path, discover=False)

    assert config.newline is True


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        build_config(cwd=tmp_path, config_file=tmp_path / "nope.toml")


def test_malformed_toml(tmp_path: Path) -> None:
    bad: Path = tmp_path / "colorformat.toml"
    bad.write_text("newline = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(bad)


def test_wrong_value_type(tmp_path: Path) -> None:
    (tmp_path / "colorformat.toml").write_text('newline = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="'newline' must be a boolean"):
        load_config(cwd=tmp_path)


def test_signs_must_be_a_table(tmp_path: Path) -> None:
    (tmp_path / "colorformat.toml").write_text('signs = "%"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(cwd=tmp_path)


def test_pyproject_section_must_be_a_table(tmp_path: Path) -> None:
    pyproject: Path = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool]\ncolorformat = 1\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_pyproject_table(pyproject)


def test_colliding_signs_fail_on_freeze(tmp_path: Path) -> None:
    (tmp_path / "colorformat.toml").write_text('[signs]\nback = "%"\n', encoding="utf-8")

    with pytest.raises(SignConfigError):
        load_config(cwd=tmp_path)


def test_unknown_keys_are_warned_and_ignored(caplog: pytest.LogCaptureFixture) -> None:
    draft = MutableConfig()

    with caplog.at_level(logging.WARNING):
        draft.merge_table({"colour": True, "signs": {"reverse": "!"}}, source="test")

    assert "unknown configuration key 'colour'" in caplog.text
    assert "signs.reverse" in caplog.text
    assert draft.freeze().signs == DEFAULT_SIGNS


def test_thaw_freeze_preserves_values() -> None:
    config = MutableConfig(newline=False, sources=["a"]).freeze()

    thawed = config.thaw()
    thawed.signs["stop"] = "|"

    assert config.signs.stop == "~"
    assert thawed.freeze() == Config(
        signs=Signs(stop="|"),
        restore_defaults=True,
        newline=False,
        sources=("a",),
    )


def test_to_toml_round_trips_through_loader(tmp_path: Path) -> None:
    """The dumped document is a valid ``colorformat.toml``."""
    original = MutableConfig(restore_defaults=False).freeze()
    dumped: Path = tmp_path / "colorformat.toml"
    dumped.write_text(to_toml(original), encoding="utf-8")

    reloaded = load_config(cwd=tmp_path)

    assert reloaded.restore_defaults is False
    assert reloaded.signs == original.signs
