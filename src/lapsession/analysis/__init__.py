"""Session analysis and report output."""

from lapsession.analysis.plots import export_lap_time_plot
from lapsession.analysis.report import export_summary_json, format_report, write_report
from lapsession.analysis.summary import SessionSummary, summarize_session

__all__ = [
    "SessionSummary",
    "export_lap_time_plot",
    "export_summary_json",
    "format_report",
    "summarize_session",
    "write_report",
]
