from covwire.core.config import (
    DEFAULT_FORMATS,
    DEFAULT_HIGH_LOWER_BOUND,
    DEFAULT_LOWER_UPPER_BOUND,
    LOG_FORMAT,
    find_pyproject,
    load_raw_options,
    select_raw_options,
)
from covwire.core.options import ResolvedOptions, normalize
from covwire.core.types import Level, Phase, ReportFormat

__all__ = [
    "DEFAULT_FORMATS",
    "DEFAULT_HIGH_LOWER_BOUND",
    "DEFAULT_LOWER_UPPER_BOUND",
    "LOG_FORMAT",
    "Level",
    "Phase",
    "ReportFormat",
    "ResolvedOptions",
    "find_pyproject",
    "load_raw_options",
    "normalize",
    "select_raw_options",
]
