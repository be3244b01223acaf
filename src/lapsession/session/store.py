"""Bounded in-memory store of recorded sessions and lap-time averages."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np

from lapsession.session.models import Session, VehicleChoice, VehicleType
from lapsession.utils.constants import (
    FORMULA_BASE_LAP_TIME,
    GT3_BASE_LAP_TIME,
    LAPS_PER_SESSION,
    MAX_SESSIONS,
    RALLY_BASE_LAP_TIME,
)

logger = logging.getLogger(__name__)


def get_base_lap_time(vehicle: VehicleChoice) -> float:
    """Return the reference lap time of a vehicle.

    Any value other than GT3 or Formula, including out-of-range menu
    integers, takes the Rally branch.

    Args:
        vehicle: Vehicle member or raw menu integer.

    Returns:
        Base lap time [s].
    """
    if vehicle == VehicleType.GT3:
        return GT3_BASE_LAP_TIME
    if vehicle == VehicleType.Formula:
        return FORMULA_BASE_LAP_TIME
    return RALLY_BASE_LAP_TIME


def calculate_average_lap(session: Session) -> float:
    """Compute the mean of the three lap times of a session.

    Args:
        session: Any session, stored or not.

    Returns:
        Unrounded arithmetic mean [s].
    """
    first, second, third = session.lap_times
    return (first + second + third) / 3.0


class SessionStore:
    """Fixed-capacity, append-only log of sessions.

    Lap times are kept in a ``(MAX_SESSIONS, LAPS_PER_SESSION)`` array that is
    allocated once; a count cursor marks the filled rows. Stored sessions are
    immutable values, so later changes to caller data never reach the store.
    """

    def __init__(self) -> None:
        """Allocate empty lap-time storage for ``MAX_SESSIONS`` sessions."""
        self._sessions = np.empty(MAX_SESSIONS, dtype=object)
        self._lap_times = np.zeros((MAX_SESSIONS, LAPS_PER_SESSION), dtype=float)
        self._count = 0

    @property
    def capacity(self) -> int:
        """Maximum number of sessions the store accepts.

        Returns:
            Fixed session capacity.
        """
        return MAX_SESSIONS

    @property
    def session_count(self) -> int:
        """Number of stored sessions.

        Returns:
            Session count in ``[0, MAX_SESSIONS]``.
        """
        return self._count

    @property
    def is_full(self) -> bool:
        """Whether further ``add_session`` calls will be rejected.

        Returns:
            ``True`` once the store holds ``MAX_SESSIONS`` sessions.
        """
        return self._count >= MAX_SESSIONS

    @property
    def sessions(self) -> tuple[Session, ...]:
        """Stored sessions in insertion order.

        Returns:
            Tuple of stored sessions.
        """
        return tuple(self._sessions[: self._count])

    def __len__(self) -> int:
        """Return the number of stored sessions.

        Returns:
            Session count.
        """
        return self._count

    def __iter__(self) -> Iterator[Session]:
        """Iterate over stored sessions in insertion order.

        Returns:
            Iterator over stored sessions.
        """
        return iter(self.sessions)

    def add_session(self, session: Session) -> bool:
        """Append a session unless the store is full.

        Args:
            session: Session to record.

        Returns:
            ``True`` when the session was stored, ``False`` when capacity is
            exhausted. A rejected call leaves the store unchanged.
        """
        if self.is_full:
            logger.warning(
                "Session store full (%d sessions), rejecting session for %r",
                MAX_SESSIONS,
                session.driver_name,
            )
            return False

        self._sessions[self._count] = session
        self._lap_times[self._count, :] = session.lap_times
        self._count += 1
        logger.debug("Stored session %d/%d for %r", self._count, MAX_SESSIONS, session.driver_name)
        return True

    def get_session_count(self) -> int:
        """Return the number of stored sessions.

        Returns:
            Session count in ``[0, MAX_SESSIONS]``.
        """
        return self._count

    def calculate_average_lap(self, session: Session) -> float:
        """Compute the mean lap time of ``session``.

        Args:
            session: Any session; it does not need to be stored here.

        Returns:
            Unrounded arithmetic mean of the three laps [s].
        """
        return calculate_average_lap(session)

    def calculate_overall_average(self) -> float:
        """Compute the mean of every stored lap time.

        Returns:
            Mean over ``3 * session_count`` laps [s], or ``0.0`` for an empty
            store.
        """
        if self._count == 0:
            return 0.0
        return float(np.mean(self._lap_times[: self._count]))

    def get_base_lap_time(self, vehicle: VehicleChoice) -> float:
        """Return the reference lap time of ``vehicle``.

        Args:
            vehicle: Vehicle member or raw menu integer.

        Returns:
            Base lap time [s].
        """
        return get_base_lap_time(vehicle)
