"""Record one driving session from the console and write a lap report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from lapsession.analysis import (
    export_lap_time_plot,
    export_summary_json,
    summarize_session,
    write_report,
)
from lapsession.session import (
    Session,
    SessionStore,
    VehicleChoice,
    VehicleType,
    parse_vehicle_choice,
)
from lapsession.simulation import build_rng, generate_lap_times
from lapsession.utils import configure_logging
from lapsession.utils.exceptions import SessionInputError

logger = logging.getLogger(__name__)

BANNER = (
    "========================================\n"
    "     Welcome to Motorsports Simulator\n"
    "========================================\n"
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Argument list. ``None`` reads ``sys.argv``.

    Returns:
        Parsed command-line namespace.
    """
    parser = argparse.ArgumentParser(prog="lapsession", description=__doc__)
    parser.add_argument("--report", type=Path, default=Path("report.txt"))
    parser.add_argument("--json", type=Path, default=None, help="Also write a JSON summary.")
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Also write a lap-time plot (path without suffix; PNG and PDF).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible lap times.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser.parse_args(argv)


def _prompt(label: str, stdin: TextIO, stdout: TextIO) -> str:
    """Print a prompt and read one line without its newline.

    Args:
        label: Prompt text.
        stdin: Input stream.
        stdout: Output stream.

    Returns:
        Entered line. End of input yields an empty string.
    """
    stdout.write(label)
    stdout.flush()
    return stdin.readline().rstrip("\r\n")


def read_session_input(stdin: TextIO, stdout: TextIO) -> tuple[str, str, VehicleChoice]:
    """Collect driver, track and vehicle choice from the console.

    Args:
        stdin: Input stream.
        stdout: Output stream.

    Returns:
        Driver name, track name and vehicle choice.

    Raises:
        lapsession.utils.exceptions.SessionInputError: If the vehicle choice is
            not an integer.
    """
    driver = _prompt("Enter driver name: ", stdin, stdout)
    track = _prompt("Enter track name: ", stdin, stdout)
    stdout.write("\nChoose a vehicle:\n")
    for vehicle in VehicleType:
        stdout.write(f"{vehicle.value}. {vehicle.name}\n")
    choice = parse_vehicle_choice(_prompt("Choice: ", stdin, stdout))
    return driver, track, choice


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one console session and write the report.

    Args:
        argv: Argument list. ``None`` reads ``sys.argv``.
        stdin: Input stream. Defaults to ``sys.stdin``.
        stdout: Output stream. Defaults to ``sys.stdout``.

    Returns:
        Process exit status.
    """
    args = _parse_args(argv)
    configure_logging(getattr(logging, args.log_level))
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(BANNER + "\n")
    try:
        driver, track, vehicle = read_session_input(stdin, stdout)
    except SessionInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    rng = build_rng(args.seed)
    session = Session(
        driver_name=driver,
        track_name=track,
        vehicle=vehicle,
        lap_times=generate_lap_times(vehicle, rng),
    )

    store = SessionStore()
    store.add_session(session)
    summary = summarize_session(store, session)

    stdout.write("\nLap Times:\n")
    for index, lap in enumerate(summary.lap_times, start=1):
        stdout.write(f"Lap {index}: {lap:.2f} seconds\n")
    stdout.write(f"\nAverage Lap Time: {summary.average_lap:.2f} seconds\n")
    stdout.write(f"Overall Average: {summary.overall_average:.2f} seconds\n")

    try:
        report_path = write_report(session, summary.average_lap, args.report)
        if args.json is not None:
            export_summary_json(summary, args.json)
        if args.plot is not None:
            export_lap_time_plot(session, args.plot)
    except OSError as exc:
        logger.error("Could not write output: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    stdout.write(f"\nReport saved to {report_path}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
