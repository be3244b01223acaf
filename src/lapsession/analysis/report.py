"""Fixed-width text report and JSON export of session results."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

from lapsession.analysis.summary import SessionSummary
from lapsession.session.models import Session

logger = logging.getLogger(__name__)

DEFAULT_REPORT_NAME = "report.txt"
REPORT_COLUMNS = (
    ("Driver", 15),
    ("Track", 15),
    ("Vehicle", 10),
    ("Avg Lap", 12),
)


def _format_row(values: tuple[str, ...]) -> str:
    """Left-align values into the report columns.

    Args:
        values: One string per column.

    Returns:
        Row text without trailing newline. Overlong values are not truncated.
    """
    return "".join(
        f"{value:<{width}}" for value, (_, width) in zip(values, REPORT_COLUMNS, strict=True)
    )


def format_report(session: Session, average: float) -> str:
    """Render the report table for one session.

    Args:
        session: Session shown in the data row.
        average: Average lap time of ``session`` [s].

    Returns:
        Header row and one data row, newline terminated. The average is
        written as a general-format float with 6 significant digits.
    """
    header = _format_row(tuple(name for name, _ in REPORT_COLUMNS))
    row = _format_row(
        (
            session.driver_name,
            session.track_name,
            session.vehicle_name,
            f"{average:g}",
        )
    )
    return f"{header}\n{row}\n"


def write_report(session: Session, average: float, path: str | Path = DEFAULT_REPORT_NAME) -> Path:
    """Write the report table to a text file.

    Args:
        session: Session shown in the data row.
        average: Average lap time of ``session`` [s].
        path: Output file path.

    Returns:
        Path of the written report.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(format_report(session, average), encoding="utf-8")
    logger.info("Report written to %s", out)
    return out


def export_summary_json(summary: SessionSummary, path: str | Path) -> None:
    """Persist a session summary as JSON.

    Args:
        summary: Summary returned by
            :func:`lapsession.analysis.summary.summarize_session`.
        path: Output file path for the JSON document.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(asdict(summary), indent=2), encoding="utf-8")
    logger.info("Summary written to %s", out)
