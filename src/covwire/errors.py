"""Centralised exception hierarchy for covwire."""

from __future__ import annotations


class CovwireError(Exception):
    """Base class for all custom covwire exceptions."""


class NoCoverageDriverAvailableError(CovwireError):
    """The platform offers no usable coverage engine."""


class ConfigError(CovwireError):
    """A configuration file exists but could not be read."""


class ReportError(CovwireError):
    """A report generator failed to write its artifact."""


class UnsupportedReportError(ReportError):
    """The coverage engine has no writer for the requested format."""


__all__ = [
    "ConfigError",
    "CovwireError",
    "NoCoverageDriverAvailableError",
    "ReportError",
    "UnsupportedReportError",
]
