"""pytest entry point: registers the coverage listener for the session."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

import pytest
from rich.console import Console

from covwire import logger
from covwire.core.config import find_pyproject, select_raw_options
from covwire.core.options import ResolvedOptions, normalize
from covwire.driver import create_coverage
from covwire.errors import ConfigError, NoCoverageDriverAvailableError
from covwire.listener import CoverageListener
from covwire.reports.builder import build_report_set

if TYPE_CHECKING:
    from collections.abc import Mapping

OPTIONS_KEY = pytest.StashKey[ResolvedOptions]()
PLUGIN_NAME = "covwire-listener"


class CoveragePlugin:
    """Forwards pytest's session hooks to a :class:`CoverageListener`."""

    def __init__(self, listener: CoverageListener, buffer: io.StringIO) -> None:
        self.listener = listener
        self._buffer = buffer

    @pytest.hookimpl(tryfirst=True)
    def pytest_sessionstart(self, session: pytest.Session) -> None:
        self.listener.before_suite()

    @pytest.hookimpl(tryfirst=True)
    def pytest_runtest_setup(self, item: pytest.Item) -> None:
        self.listener.before_test(item.nodeid)

    @pytest.hookimpl(trylast=True)
    def pytest_runtest_teardown(self, item: pytest.Item) -> None:
        self.listener.after_test()

    def pytest_sessionfinish(self, session: pytest.Session, exitstatus: int) -> None:
        self.listener.after_suite(exitstatus)

    def pytest_terminal_summary(self, terminalreporter: Any) -> None:
        output = self._buffer.getvalue()
        if not output.strip():
            return
        terminalreporter.section("coverage")
        terminalreporter.write(output)
        self._buffer.seek(0)
        self._buffer.truncate()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("covwire", "code coverage reports")
    group.addoption(
        "--no-coverage",
        action="store_true",
        default=False,
        dest="no_coverage",
        help="Skip code coverage generation",
    )


def build_listener(
    config: pytest.Config,
    params: Mapping[str, Any] | None = None,
    *,
    console: Console | None = None,
) -> CoverageListener:
    """Wire options, reports and the engine into a listener for *config*."""
    skip = bool(config.getoption("no_coverage", default=False))
    try:
        raw = select_raw_options(dict(params) if params else None, find_pyproject(config.rootpath))
    except ConfigError as exc:
        raise pytest.UsageError(str(exc)) from exc

    options = normalize(raw)
    config.stash[OPTIONS_KEY] = options
    reports = build_report_set(options.format, options)

    cov = None
    if not skip:
        try:
            cov = create_coverage()
        except NoCoverageDriverAvailableError as exc:
            raise pytest.UsageError(str(exc)) from exc

    return CoverageListener(cov, reports, options, skip_coverage=skip, console=console)


@pytest.hookimpl(trylast=True)
def pytest_configure(config: pytest.Config) -> None:
    buffer = io.StringIO()
    reporter = config.pluginmanager.get_plugin("terminalreporter")
    markup = bool(getattr(reporter, "hasmarkup", False))
    console = Console(file=buffer, force_terminal=markup)
    listener = build_listener(config, console=console)
    config.pluginmanager.register(CoveragePlugin(listener, buffer), PLUGIN_NAME)
    logger.debug("registered %s with formats %s", PLUGIN_NAME, ", ".join(listener.reports) or "<none>")


def pytest_unconfigure(config: pytest.Config) -> None:
    plugin = config.pluginmanager.get_plugin(PLUGIN_NAME)
    if plugin is not None:
        config.pluginmanager.unregister(plugin)
