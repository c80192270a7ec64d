"""Suite-level hooks that drive the coverage engine and emit reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.console import Console

from covwire import logger
from covwire.core.types import Phase
from covwire.errors import ReportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from coverage import Coverage

    from covwire.core.options import ResolvedOptions
    from covwire.reports.generators import ReportGenerator


@dataclass(frozen=True, slots=True)
class ListenerState:
    """Per-run settings fixed at wiring time."""

    skip_coverage: bool
    options: ResolvedOptions


class CoverageListener:
    """Start instrumentation before the suite and report after it.

    Phases move ``IDLE -> INSTRUMENTING -> REPORTING_DONE``; with
    ``skip_coverage`` the listener stays ``IDLE`` for the whole run. A new
    :meth:`before_suite` starts the cycle again.
    """

    def __init__(
        self,
        cov: Coverage | None,
        reports: Mapping[str, ReportGenerator],
        options: ResolvedOptions,
        *,
        skip_coverage: bool = False,
        console: Console | None = None,
    ) -> None:
        if cov is None and not skip_coverage:
            msg = "a coverage engine is required unless coverage is skipped"
            raise ValueError(msg)
        self.cov = cov
        self.reports = dict(reports)
        self.state = ListenerState(skip_coverage=skip_coverage, options=options)
        self.console = console or Console()
        self.phase = Phase.IDLE
        self._runs = 0

    @property
    def options(self) -> ResolvedOptions:
        return self.state.options

    def _engine(self) -> Coverage:
        if self.cov is None:
            msg = "coverage is skipped for this run; no engine is available"
            raise RuntimeError(msg)
        return self.cov

    def before_suite(self) -> None:
        self.phase = Phase.IDLE
        if self.state.skip_coverage:
            logger.debug("coverage skipped for this run")
            return
        cov = self._engine()
        if self._runs:
            cov.erase()
        cov.start()
        self._runs += 1
        self.phase = Phase.INSTRUMENTING

    def before_test(self, name: str) -> None:
        if self.phase is Phase.INSTRUMENTING:
            self._engine().switch_context(name)

    def after_test(self) -> None:
        if self.phase is Phase.INSTRUMENTING:
            self._engine().switch_context("")

    def after_suite(self, result: Any = None) -> list[str]:
        """Stop instrumentation and run every report generator.

        Returns the formats that produced an artifact. A generator that fails
        is logged and skipped; the others still run.
        """
        if self.phase is not Phase.INSTRUMENTING:
            return []
        cov = self._engine()
        cov.stop()
        logger.debug("test suite finished with %r; writing %d report(s)", result, len(self.reports))

        written: list[str] = []
        for fmt, report in self.reports.items():
            logger.info("Generating code coverage report in %s format ...", fmt)
            try:
                location = report.process(cov, self.options.output_for(fmt), console=self.console)
            except ReportError as exc:
                logger.warning("%s", exc)
                continue
            logger.info("Wrote %s coverage report to %s", fmt, location)
            written.append(fmt)

        self.phase = Phase.REPORTING_DONE
        return written


__all__ = ["CoverageListener", "ListenerState"]
