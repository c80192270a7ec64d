"""Shared type aliases and enumerations used across covwire."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

CoveragePercent: TypeAlias = float
"""Percentage value in the inclusive range ``0`` to ``100``."""

Target: TypeAlias = str | None
"""Output location for one report; ``None`` selects the engine default."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ReportFormat(StrEnum):
    """Report formats a configuration may request."""

    CLOVER = "clover"
    PHP = "php"
    TEXT = "text"
    XML = "xml"
    CRAP4J = "crap4j"
    HTML = "html"
    COBERTURA = "cobertura"


class Phase(StrEnum):
    """Lifecycle of a :class:`~covwire.listener.CoverageListener` within one run."""

    IDLE = "idle"
    INSTRUMENTING = "instrumenting"
    REPORTING_DONE = "reporting-done"


class Level(StrEnum):
    """Classification of a coverage percentage against the text report bounds."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


__all__ = [
    "CoveragePercent",
    "Level",
    "Phase",
    "ReportFormat",
    "Target",
]
