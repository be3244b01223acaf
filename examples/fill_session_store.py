"""Fill a session store with generated sessions and report the averages."""

from __future__ import annotations

import logging
from pathlib import Path

from lapsession.analysis import export_summary_json, summarize_session, write_report
from lapsession.session import Session, SessionStore, VehicleType
from lapsession.simulation import build_rng, generate_lap_times
from lapsession.utils import configure_logging

DRIVERS = (
    ("Ana", "Spa", VehicleType.GT3),
    ("Ben", "Monza", VehicleType.Formula),
    ("Cleo", "Rovaniemi", VehicleType.Rally),
    ("Dev", "Suzuka", VehicleType.Formula),
    ("Eli", "Bathurst", VehicleType.GT3),
    ("Fay", "Imola", VehicleType.Formula),
)


def main() -> None:
    """Record six sessions into a five-slot store and export the last report."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("fill_session_store")

    rng = build_rng(2024)
    store = SessionStore()
    last_stored: Session | None = None
    for driver, track, vehicle in DRIVERS:
        session = Session(driver, track, vehicle, generate_lap_times(vehicle, rng))
        if store.add_session(session):
            last_stored = session
            logger.info(
                "%s @ %s (%s): avg %.2f s",
                driver,
                track,
                session.vehicle_name,
                store.calculate_average_lap(session),
            )
        else:
            logger.info("Store full, %s was not recorded", driver)

    logger.info("Sessions stored: %d", store.get_session_count())
    logger.info("Overall average: %.2f s", store.calculate_overall_average())

    if last_stored is not None:
        output_dir = Path(__file__).resolve().parent / "output"
        summary = summarize_session(store, last_stored)
        write_report(last_stored, summary.average_lap, output_dir / "report.txt")
        export_summary_json(summary, output_dir / "summary.json")


if __name__ == "__main__":
    main()
