"""Central configuration and constants for ``covwire``."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from covwire import logger
from covwire.errors import ConfigError

# Formats written when the configuration names none.
DEFAULT_FORMATS: tuple[str, ...] = ("html",)

# Text report thresholds: below the first is low, from the second on is high.
DEFAULT_LOWER_UPPER_BOUND = 35
DEFAULT_HIGH_LOWER_BOUND = 70

DEFAULT_SHOW_UNCOVERED_FILES = True
DEFAULT_SHOW_ONLY_SUMMARY = False

# Table below ``[tool]`` in pyproject.toml holding the raw options.
CONFIG_TABLE = "covwire"

PYPROJECT = "pyproject.toml"

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


def find_pyproject(start: Path) -> Path | None:
    """Return the closest ``pyproject.toml`` at or above *start*."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def load_raw_options(pyproject: Path | None) -> dict[str, Any]:
    """Return the ``[tool.covwire]`` table of *pyproject*.

    A missing file or table yields an empty mapping. A file that exists but
    cannot be parsed raises :class:`ConfigError`.
    """
    if pyproject is None or not pyproject.exists():
        return {}
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to parse {pyproject}: {exc}"
        raise ConfigError(msg) from exc

    table = data.get("tool", {}).get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        logger.warning("Ignoring [tool.%s] in %s: not a table", CONFIG_TABLE, pyproject)
        return {}
    logger.debug("loaded %d option(s) from %s", len(table), pyproject)
    return dict(table)


def select_raw_options(params: dict[str, Any] | None, pyproject: Path | None) -> dict[str, Any]:
    """Prefer explicitly passed *params*; fall back to the config file."""
    if params:
        return dict(params)
    return load_raw_options(pyproject)


__all__ = [
    "CONFIG_TABLE",
    "DEFAULT_FORMATS",
    "DEFAULT_HIGH_LOWER_BOUND",
    "DEFAULT_LOWER_UPPER_BOUND",
    "DEFAULT_SHOW_ONLY_SUMMARY",
    "DEFAULT_SHOW_UNCOVERED_FILES",
    "LOG_FORMAT",
    "PYPROJECT",
    "find_pyproject",
    "load_raw_options",
    "select_raw_options",
]
