"""Tests for configuration helpers and module side-effect behavior."""

from __future__ import annotations

import importlib
import logging
import sys
from typing import TYPE_CHECKING

import pytest

from covwire.core.config import find_pyproject, load_raw_options, select_raw_options
from covwire.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from _pytest.monkeypatch import MonkeyPatch


def test_import_has_no_side_effects(monkeypatch: MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args, **kwargs):
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)

    for name in [m for m in sys.modules if m == "covwire" or m.startswith("covwire.")]:
        monkeypatch.delitem(sys.modules, name)

    importlib.import_module("covwire.reports")

    assert not basic_called


def test_load_raw_options_reads_tool_table(write_pyproject: Callable[[str], Path]) -> None:
    pyproject = write_pyproject(
        """
        [tool.covwire]
        format = ["clover", "text"]
        lower_upper_bound = 40

        [tool.covwire.output]
        clover = "build/clover.xml"
        """
    )
    assert load_raw_options(pyproject) == {
        "format": ["clover", "text"],
        "lower_upper_bound": 40,
        "output": {"clover": "build/clover.xml"},
    }


def test_load_raw_options_without_table(write_pyproject: Callable[[str], Path]) -> None:
    pyproject = write_pyproject(
        """
        [tool.pytest.ini_options]
        addopts = ["-q"]
        """
    )
    assert load_raw_options(pyproject) == {}


def test_load_raw_options_missing_file(tmp_path: Path) -> None:
    assert load_raw_options(tmp_path / "pyproject.toml") == {}
    assert load_raw_options(None) == {}


def test_load_raw_options_rejects_malformed_file(write_pyproject: Callable[[str], Path]) -> None:
    pyproject = write_pyproject("[tool.covwire\nformat = ")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_raw_options(pyproject)


def test_load_raw_options_ignores_non_table(
    write_pyproject: Callable[[str], Path], caplog: pytest.LogCaptureFixture
) -> None:
    pyproject = write_pyproject(
        """
        [tool]
        covwire = "html"
        """
    )
    with caplog.at_level(logging.WARNING, logger="covwire"):
        assert load_raw_options(pyproject) == {}
    assert "not a table" in caplog.text


def test_find_pyproject_walks_upwards(write_pyproject: Callable[[str], Path], tmp_path: Path) -> None:
    pyproject = write_pyproject("[project]\nname = 'x'\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_pyproject(nested) == pyproject.resolve()


def test_explicit_params_take_precedence(write_pyproject: Callable[[str], Path]) -> None:
    pyproject = write_pyproject(
        """
        [tool.covwire]
        format = "xml"
        """
    )
    assert select_raw_options({"format": "text"}, pyproject) == {"format": "text"}
    assert select_raw_options({}, pyproject) == {"format": "xml"}
    assert select_raw_options(None, pyproject) == {"format": "xml"}
