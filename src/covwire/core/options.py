"""Turn sparse user options into a fully resolved configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from covwire import logger
from covwire.core.config import (
    DEFAULT_FORMATS,
    DEFAULT_HIGH_LOWER_BOUND,
    DEFAULT_LOWER_UPPER_BOUND,
    DEFAULT_SHOW_ONLY_SUMMARY,
    DEFAULT_SHOW_UNCOVERED_FILES,
)

_KNOWN_KEYS = frozenset(
    {
        "format",
        "output",
        "show_uncovered_files",
        "lower_upper_bound",
        "high_lower_bound",
        "show_only_summary",
    }
)


@dataclass(frozen=True, slots=True)
class ResolvedOptions:
    """Options with every default applied.

    ``output`` is either a mapping of format name to target, or the raw scalar
    when a single target was given for several formats, or ``None``.
    """

    format: list[str]
    output: Any = None
    show_uncovered_files: bool = DEFAULT_SHOW_UNCOVERED_FILES
    lower_upper_bound: Any = DEFAULT_LOWER_UPPER_BOUND
    high_lower_bound: Any = DEFAULT_HIGH_LOWER_BOUND
    show_only_summary: bool = DEFAULT_SHOW_ONLY_SUMMARY
    extra: Mapping[str, Any] = field(default_factory=dict)

    def output_for(self, fmt: str) -> str | None:
        """Return the configured target for *fmt*, or ``None`` for the default."""
        if isinstance(self.output, Mapping):
            target = self.output.get(fmt)
            return None if target is None else str(target)
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            format=list(self.format),
            show_uncovered_files=self.show_uncovered_files,
            lower_upper_bound=self.lower_upper_bound,
            high_lower_bound=self.high_lower_bound,
            show_only_summary=self.show_only_summary,
        )
        if self.output is not None:
            data["output"] = dict(self.output) if isinstance(self.output, Mapping) else self.output
        return data


def _resolve_formats(value: Any) -> list[str]:
    if value is None:
        return list(DEFAULT_FORMATS)
    if isinstance(value, (list, tuple)):
        return list(value) if value else list(DEFAULT_FORMATS)
    return [value]


def _resolve_output(value: Any, formats: list[str]) -> Any:
    if value is None or isinstance(value, Mapping):
        return value
    if len(formats) == 1 and isinstance(formats[0], str):
        return {formats[0]: value}
    logger.warning(
        "A single output %r was given for %d format(s) (%s); each report uses its default location",
        value,
        len(formats),
        ", ".join(map(str, formats)),
    )
    return value


def _default(raw: Mapping[str, Any], key: str, fallback: Any) -> Any:
    value = raw.get(key)
    return fallback if value is None else value


def normalize(raw: Mapping[str, Any] | None) -> ResolvedOptions:
    """Fill every gap in *raw* with its default.

    Never rejects input: values are passed through uninterpreted, so bounds are
    not checked against each other.
    """
    raw = raw or {}
    formats = _resolve_formats(raw.get("format"))
    return ResolvedOptions(
        format=formats,
        output=_resolve_output(raw.get("output"), formats),
        show_uncovered_files=_default(raw, "show_uncovered_files", DEFAULT_SHOW_UNCOVERED_FILES),
        lower_upper_bound=_default(raw, "lower_upper_bound", DEFAULT_LOWER_UPPER_BOUND),
        high_lower_bound=_default(raw, "high_lower_bound", DEFAULT_HIGH_LOWER_BOUND),
        show_only_summary=_default(raw, "show_only_summary", DEFAULT_SHOW_ONLY_SUMMARY),
        extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
    )


__all__ = ["ResolvedOptions", "normalize"]
