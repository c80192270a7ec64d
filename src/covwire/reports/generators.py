"""Report generators: one variant per supported format tag.

Each generator is a small immutable value that knows how to ask the coverage
engine for one artifact. Engine calls pass through :func:`_call_supported`,
which drops keyword arguments the installed coverage.py does not accept.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from coverage import CoverageData
from coverage.exceptions import CoverageException
from rich.console import Console

from covwire import logger
from covwire.core.config import (
    DEFAULT_HIGH_LOWER_BOUND,
    DEFAULT_LOWER_UPPER_BOUND,
    DEFAULT_SHOW_ONLY_SUMMARY,
    DEFAULT_SHOW_UNCOVERED_FILES,
)
from covwire.core.types import ReportFormat
from covwire.errors import ReportError, UnsupportedReportError
from covwire.reports.text import collect_file_coverage, render_text_report

if TYPE_CHECKING:
    from collections.abc import Callable

    from coverage import Coverage

    from covwire.core.types import Target

CONSOLE = "<console>"
DEFAULT_COBERTURA_OUTPUT = "cobertura.xml"


class ReportGenerator(Protocol):
    format: ClassVar[ReportFormat]

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        """Write the report and return where it went."""
        ...


def _call_supported(method: Callable[..., Any], **kwargs: Any) -> Any:
    """Call *method* with the subset of *kwargs* its signature accepts."""
    params = inspect.signature(method).parameters
    accepted = {k: v for k, v in kwargs.items() if k in params}
    dropped = sorted(set(kwargs) - set(accepted))
    if dropped:
        logger.debug("%s does not accept %s; dropped", getattr(method, "__name__", method), ", ".join(dropped))
    return method(**accepted)


def _ensure_parent(target: str) -> None:
    Path(target).parent.mkdir(parents=True, exist_ok=True)


def _engine_error(fmt: ReportFormat, exc: Exception) -> ReportError:
    return ReportError(f"Failed to generate {fmt} report: {exc}")


@dataclass(frozen=True, slots=True)
class HtmlReport:
    format: ClassVar[ReportFormat] = ReportFormat.HTML

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        try:
            _call_supported(cov.html_report, directory=target, show_contexts=True)
            return target or str(cov.get_option("html:directory"))
        except (CoverageException, OSError) as exc:
            raise _engine_error(self.format, exc) from exc


@dataclass(frozen=True, slots=True)
class XmlReport:
    format: ClassVar[ReportFormat] = ReportFormat.XML

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        try:
            if target:
                _ensure_parent(target)
            cov.xml_report(outfile=target)
            return target or str(cov.get_option("xml:output"))
        except (CoverageException, OSError) as exc:
            raise _engine_error(self.format, exc) from exc


@dataclass(frozen=True, slots=True)
class CoberturaReport:
    format: ClassVar[ReportFormat] = ReportFormat.COBERTURA

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        outfile = target or DEFAULT_COBERTURA_OUTPUT
        try:
            _ensure_parent(outfile)
            cov.xml_report(outfile=outfile)
        except (CoverageException, OSError) as exc:
            raise _engine_error(self.format, exc) from exc
        return outfile


@dataclass(frozen=True, slots=True)
class SerializedReport:
    """The engine's own data file, reloadable with ``coverage.CoverageData``."""

    format: ClassVar[ReportFormat] = ReportFormat.PHP

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        try:
            if target is None:
                cov.save()
                return str(cov.get_option("run:data_file"))
            _ensure_parent(target)
            data = CoverageData(basename=target)
            data.update(cov.get_data())
            data.write()
        except (CoverageException, OSError) as exc:
            raise _engine_error(self.format, exc) from exc
        return target


@dataclass(frozen=True, slots=True)
class TextReport:
    format: ClassVar[ReportFormat] = ReportFormat.TEXT

    lower_upper_bound: Any = DEFAULT_LOWER_UPPER_BOUND
    high_lower_bound: Any = DEFAULT_HIGH_LOWER_BOUND
    show_uncovered_files: bool = DEFAULT_SHOW_UNCOVERED_FILES
    show_only_summary: bool = DEFAULT_SHOW_ONLY_SUMMARY

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        files = collect_file_coverage(cov)
        if target is None:
            self._render(files, console)
            return CONSOLE
        try:
            _ensure_parent(target)
            with Path(target).open("w", encoding="utf-8") as fh:
                self._render(files, Console(file=fh, width=120))
        except OSError as exc:
            raise _engine_error(self.format, exc) from exc
        return target

    def _render(self, files, console: Console) -> None:
        render_text_report(
            files,
            console,
            lower_upper_bound=self.lower_upper_bound,
            high_lower_bound=self.high_lower_bound,
            show_uncovered_files=self.show_uncovered_files,
            show_only_summary=self.show_only_summary,
        )


@dataclass(frozen=True, slots=True)
class CloverReport:
    format: ClassVar[ReportFormat] = ReportFormat.CLOVER

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        msg = "coverage.py has no clover writer; use 'xml' or 'cobertura' instead"
        raise UnsupportedReportError(msg)


@dataclass(frozen=True, slots=True)
class Crap4jReport:
    format: ClassVar[ReportFormat] = ReportFormat.CRAP4J

    def process(self, cov: Coverage, target: Target, *, console: Console) -> str:
        msg = "coverage.py has no crap4j writer"
        raise UnsupportedReportError(msg)


__all__ = [
    "CONSOLE",
    "CloverReport",
    "CoberturaReport",
    "Crap4jReport",
    "HtmlReport",
    "ReportGenerator",
    "SerializedReport",
    "TextReport",
    "XmlReport",
]
