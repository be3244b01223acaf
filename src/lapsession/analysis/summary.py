"""Per-session summary metrics."""

from __future__ import annotations

from dataclasses import dataclass

from lapsession.session.models import Session
from lapsession.session.store import SessionStore, calculate_average_lap


@dataclass(frozen=True)
class SessionSummary:
    """Summary metrics for one session in the context of a store.

    Args:
        driver_name: Driver label.
        track_name: Track label.
        vehicle: Vehicle report label.
        lap_times: The three lap durations [s].
        average_lap: Mean lap time of the session [s].
        overall_average: Mean lap time across every stored session [s].
        session_count: Number of sessions in the store.
    """

    driver_name: str
    track_name: str
    vehicle: str
    lap_times: tuple[float, float, float]
    average_lap: float
    overall_average: float
    session_count: int


def summarize_session(store: SessionStore, session: Session) -> SessionSummary:
    """Compute session and store-wide averages.

    Args:
        store: Store whose overall average is reported.
        session: Session to summarize; it does not need to be stored.

    Returns:
        Summary dataclass.
    """
    return SessionSummary(
        driver_name=session.driver_name,
        track_name=session.track_name,
        vehicle=session.vehicle_name,
        lap_times=session.lap_times,
        average_lap=calculate_average_lap(session),
        overall_average=store.calculate_overall_average(),
        session_count=store.session_count,
    )
