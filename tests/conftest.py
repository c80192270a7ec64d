from __future__ import annotations

import textwrap
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import pytest
from click.testing import CliRunner
from coverage.exceptions import NoSource

from covwire.core.types import ReportFormat

pytest_plugins = ["pytester"]


class FakeData:
    def __init__(self, files: Sequence[str]) -> None:
        self._files = list(files)

    def measured_files(self) -> set[str]:
        return set(self._files)


class FakeCoverage:
    """Records the engine calls made by listeners and generators."""

    def __init__(self, files: Mapping[str, tuple[int, Sequence[int]]] | None = None) -> None:
        # path -> (statement count, missing line numbers)
        self.files = dict(files or {})
        self.calls: list[tuple[str, Any]] = []
        self.options = {
            "html:directory": "htmlcov",
            "xml:output": "coverage.xml",
            "run:data_file": ".coverage",
        }

    def start(self) -> None:
        self.calls.append(("start", None))

    def stop(self) -> None:
        self.calls.append(("stop", None))

    def erase(self) -> None:
        self.calls.append(("erase", None))

    def save(self) -> None:
        self.calls.append(("save", None))

    def switch_context(self, name: str) -> None:
        self.calls.append(("switch_context", name))

    def html_report(self, directory: str | None = None) -> float:
        self.calls.append(("html_report", directory))
        return 100.0

    def xml_report(self, outfile: str | None = None) -> float:
        self.calls.append(("xml_report", outfile))
        return 100.0

    def get_option(self, key: str) -> str:
        return self.options[key]

    def get_data(self) -> FakeData:
        return FakeData(self.files)

    def analysis2(self, path: str) -> tuple[str, list[int], list[int], list[int], str]:
        if path not in self.files:
            msg = f"No source for code: {path!r}."
            raise NoSource(msg)
        count, missing = self.files[path]
        return path, list(range(1, count + 1)), [], list(missing), ""

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@dataclass
class RecordingReport:
    """Generator stand-in that remembers every invocation."""

    format: ClassVar[ReportFormat] = ReportFormat.CLOVER

    invocations: list[tuple[Any, Any]] = field(default_factory=list)

    def process(self, cov: Any, target: Any, *, console: Any) -> str:
        self.invocations.append((cov, target))
        return target or "<default>"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def fake_coverage() -> Callable[..., FakeCoverage]:
    return FakeCoverage


@pytest.fixture
def write_pyproject(tmp_path: Path) -> Callable[[str], Path]:
    def write(body: str) -> Path:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(textwrap.dedent(body), encoding="utf-8")
        return pyproject

    return write


@pytest.fixture
def recording_report() -> Callable[[], RecordingReport]:
    return RecordingReport
