"""Construction of the coverage engine used by the listener."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

from covwire import logger
from covwire.errors import NoCoverageDriverAvailableError

if TYPE_CHECKING:
    from coverage import Coverage

NO_DRIVER_MESSAGE = "There is no available coverage driver to be used."


def create_coverage(**kwargs: Any) -> Coverage:
    """Return a fresh, not yet started :class:`coverage.Coverage`.

    coverage.py reads its own configuration (``[tool.coverage]``,
    ``.coveragerc``) unless *kwargs* override ``config_file``.

    Raises
    ------
    NoCoverageDriverAvailableError
        When coverage.py cannot be imported or refuses to build an engine.
    """
    try:
        coverage = importlib.import_module("coverage")
    except ImportError as exc:
        raise NoCoverageDriverAvailableError(NO_DRIVER_MESSAGE) from exc

    kwargs.setdefault("config_file", True)
    try:
        cov = coverage.Coverage(**kwargs)
    except coverage.CoverageException as exc:
        raise NoCoverageDriverAvailableError(NO_DRIVER_MESSAGE) from exc

    logger.debug("coverage.py %s engine ready", coverage.__version__)
    return cov


__all__ = ["NO_DRIVER_MESSAGE", "create_coverage"]
