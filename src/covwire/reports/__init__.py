from covwire.reports.builder import ReportSet, build_report_set
from covwire.reports.generators import CONSOLE, ReportGenerator, TextReport

__all__ = ["CONSOLE", "ReportGenerator", "ReportSet", "TextReport", "build_report_set"]
