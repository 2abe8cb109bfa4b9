"""Tests for sloc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from sloc.config import ConfigError, SlocConfig, SortConfig, load_config


def _write_config(tmp_path: Path, text: str) -> Path:
    config_file = tmp_path / ".sloc.yml"
    config_file.write_text(text, encoding="utf-8")
    return config_file


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SlocConfig)
    assert config.root == tmp_path.resolve()
    assert config.recursive is False
    assert config.encoding == "utf-8"
    assert config.show_totals is True
    assert config.sort == SortConfig()
    assert config.exclude_paths == []


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = _write_config(
        tmp_path,
        """
recursive: true
encoding: latin-1
show_totals: false
sort:
  key: S
  order: desc
exclude_paths:
  - "build/"
  - "*.gen.c"
""",
    )

    config = load_config(config_file)

    assert config.recursive is True
    assert config.encoding == "latin-1"
    assert config.show_totals is False
    assert config.sort.key == "s"
    assert config.sort.descending is True
    assert config.exclude_paths == ["build/", "*.gen.c"]


def test_load_config_accepts_directory_and_sort_shorthand(tmp_path: Path) -> None:
    _write_config(tmp_path, "sort: f\nexclude_paths: third_party/\n")

    config = load_config(tmp_path)

    assert config.sort.key == "f"
    assert config.sort.descending is False
    assert config.exclude_paths == ["third_party/"]


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, "\n"))
    assert config.recursive is False
    assert config.sort.key is None


@pytest.mark.parametrize(
    "text",
    [
        "sort:\n  key: z\n",
        "sort:\n  order: sideways\n",
        "encoding: not-a-codec\n",
        "- just\n- a list\n",
        "recursive: [unclosed\n",
        "recursive: 2\n",
        "show_totals: maybe\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str) -> None:
    config_file = _write_config(tmp_path, text)
    with pytest.raises(ConfigError):
        load_config(config_file)


@pytest.mark.parametrize(
    ("text", "recursive", "show_totals"),
    [
        ("recursive: 1\nshow_totals: 0\n", True, False),
        ("recursive: 'yes'\nshow_totals: 'no'\n", True, False),
        ("recursive: false\n", False, True),
    ],
)
def test_boolean_settings_accept_integer_and_string_forms(
    tmp_path: Path, text: str, recursive: bool, show_totals: bool
) -> None:
    config = load_config(_write_config(tmp_path, text))

    assert config.recursive is recursive
    assert config.show_totals is show_totals
