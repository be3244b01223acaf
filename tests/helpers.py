"""Shared test helpers."""

from __future__ import annotations

from lapsession.session.models import Session, VehicleType


def sample_session(
    lap_times: tuple[float, float, float] = (100.0, 98.0, 102.0),
    vehicle: VehicleType | int = VehicleType.GT3,
) -> Session:
    """Create a representative session.

    Args:
        lap_times: Lap durations [s].
        vehicle: Vehicle member or raw menu integer.

    Returns:
        Session used by unit and integration tests.
    """
    return Session(
        driver_name="Test",
        track_name="Track",
        vehicle=vehicle,
        lap_times=lap_times,
    )
