"""Map requested format names to report generators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from covwire import logger
from covwire.core.types import ReportFormat
from covwire.reports.generators import (
    CloverReport,
    CoberturaReport,
    Crap4jReport,
    HtmlReport,
    SerializedReport,
    TextReport,
    XmlReport,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from covwire.core.options import ResolvedOptions
    from covwire.reports.generators import ReportGenerator

ReportSet = dict[str, "ReportGenerator"]


def _text(options: ResolvedOptions | None) -> TextReport:
    if options is None:
        return TextReport()
    return TextReport(
        lower_upper_bound=options.lower_upper_bound,
        high_lower_bound=options.high_lower_bound,
        show_uncovered_files=options.show_uncovered_files,
        show_only_summary=options.show_only_summary,
    )


CONSTRUCTORS: dict[ReportFormat, Callable[[ResolvedOptions | None], ReportGenerator]] = {
    ReportFormat.CLOVER: lambda _: CloverReport(),
    ReportFormat.PHP: lambda _: SerializedReport(),
    ReportFormat.TEXT: _text,
    ReportFormat.XML: lambda _: XmlReport(),
    ReportFormat.CRAP4J: lambda _: Crap4jReport(),
    ReportFormat.HTML: lambda _: HtmlReport(),
    ReportFormat.COBERTURA: lambda _: CoberturaReport(),
}


def build_report_set(formats: Iterable[object], options: ResolvedOptions | None = None) -> ReportSet:
    """Return a generator for every recognised name in *formats*, in order.

    Unknown names are skipped. A repeated name replaces the earlier generator.
    """
    reports: ReportSet = {}
    for name in formats:
        try:
            fmt = ReportFormat(name)
        except ValueError:
            logger.debug("ignoring unknown coverage report format %r", name)
            continue
        reports[fmt.value] = CONSTRUCTORS[fmt](options)
    logger.debug("selected coverage reports: %s", ", ".join(reports) or "<none>")
    return reports


__all__ = ["CONSTRUCTORS", "ReportSet", "build_report_set"]
