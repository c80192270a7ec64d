"""Console rendering of collected coverage, coloured by the low/high bounds."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from coverage.exceptions import CoverageException
from rich import box
from rich.markup import escape
from rich.table import Table

from covwire import logger
from covwire.core.types import Level

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coverage import Coverage
    from rich.console import Console

_FULL_PERCENT = 100.0

_LEVEL_STYLE = {
    Level.LOW: "red",
    Level.MEDIUM: "yellow",
    Level.HIGH: "green",
}


@dataclass(frozen=True, slots=True)
class FileCoverage:
    """Statement counts for one measured file."""

    path: str
    statements: int
    missed: int

    @property
    def executed(self) -> int:
        return self.statements - self.missed

    @property
    def percent(self) -> float:
        if not self.statements:
            return _FULL_PERCENT
        return _FULL_PERCENT * self.executed / self.statements

    @property
    def uncovered(self) -> bool:
        """``True`` when the file has statements and none of them ran."""
        return self.statements > 0 and self.executed == 0


def classify(percent: float, lower_upper_bound: float, high_lower_bound: float) -> Level:
    """Place *percent* in the low, medium or high band."""
    if percent < float(lower_upper_bound):
        return Level.LOW
    if percent >= float(high_lower_bound):
        return Level.HIGH
    return Level.MEDIUM


def collect_file_coverage(cov: Coverage) -> list[FileCoverage]:
    """Return per-file statement counts for everything *cov* measured."""
    files: list[FileCoverage] = []
    for path in sorted(cov.get_data().measured_files()):
        try:
            _, statements, _, missing, _ = cov.analysis2(path)
        except CoverageException as exc:
            logger.debug("skipping %s in text report: %s", path, exc)
            continue
        files.append(FileCoverage(path=path, statements=len(statements), missed=len(missing)))
    return files


def _display_path(path: str) -> str:
    p = Path(path)
    try:
        return p.resolve().relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        return p.as_posix()


def _style_percent(percent: float, lower: float, high: float) -> str:
    style = _LEVEL_STYLE[classify(percent, lower, high)]
    return f"[{style}]{percent:.2f}%[/{style}]"


def render_text_report(
    files: Iterable[FileCoverage],
    console: Console,
    *,
    lower_upper_bound: float,
    high_lower_bound: float,
    show_uncovered_files: bool,
    show_only_summary: bool,
) -> None:
    """Print the coverage summary, and unless *show_only_summary* a per-file table."""
    files = list(files)
    total = sum(f.statements for f in files)
    executed = sum(f.executed for f in files)
    overall = _FULL_PERCENT * executed / total if total else _FULL_PERCENT

    console.print()
    console.print("[bold]Code Coverage Report[/bold]")
    console.print(
        f"  Lines: {_style_percent(overall, lower_upper_bound, high_lower_bound)} ({executed}/{total})"
    )
    if show_only_summary:
        return

    table = Table(box=box.SIMPLE_HEAVY, header_style="bold", expand=False)
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Stmts", justify="right")
    table.add_column("Miss", justify="right")
    table.add_column("Cover", justify="right")

    for f in files:
        if f.uncovered and not show_uncovered_files:
            continue
        table.add_row(
            escape(_display_path(f.path)),
            str(f.statements),
            str(f.missed),
            _style_percent(f.percent, lower_upper_bound, high_lower_bound),
        )

    console.print(table)


__all__ = ["FileCoverage", "classify", "collect_file_coverage", "render_text_report"]
