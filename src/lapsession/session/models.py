"""Session data model and vehicle definitions."""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from lapsession.utils.constants import LAPS_PER_SESSION
from lapsession.utils.exceptions import SessionDataError, SessionInputError

DEFAULT_VEHICLE_NAME = "Rally"


class VehicleType(IntEnum):
    """Vehicle classes offered by the console menu.

    Member values match the menu numbering so a choice converts directly.
    """

    GT3 = 1
    Formula = 2
    Rally = 3


VehicleChoice = VehicleType | int


def resolve_vehicle(choice: int) -> VehicleChoice:
    """Map a menu number onto a vehicle.

    Args:
        choice: Integer entered by the user.

    Returns:
        Matching :class:`VehicleType` member, or the raw integer when it does
        not name a vehicle. Unrecognized values are treated like
        ``VehicleType.Rally`` by base-time lookup and report formatting.
    """
    try:
        return VehicleType(choice)
    except ValueError:
        return int(choice)


def parse_vehicle_choice(text: str) -> VehicleChoice:
    """Parse console text into a vehicle choice.

    Args:
        text: Raw console line.

    Returns:
        Vehicle choice resolved through :func:`resolve_vehicle`.

    Raises:
        lapsession.utils.exceptions.SessionInputError: If ``text`` is not an
            integer.
    """
    try:
        value = int(text.strip())
    except ValueError as exc:
        msg = f"vehicle choice must be an integer, got: {text.strip()!r}"
        raise SessionInputError(msg) from exc
    return resolve_vehicle(value)


def vehicle_name(vehicle: VehicleChoice) -> str:
    """Return the report label of a vehicle choice.

    Args:
        vehicle: Vehicle member or raw menu integer.

    Returns:
        Member name for known vehicles, ``"Rally"`` otherwise.
    """
    if vehicle == VehicleType.GT3:
        return VehicleType.GT3.name
    if vehicle == VehicleType.Formula:
        return VehicleType.Formula.name
    return DEFAULT_VEHICLE_NAME


def _coerce_lap_times(values: Iterable[float]) -> tuple[float, ...]:
    """Convert lap values to a float tuple.

    Args:
        values: Lap durations [s].

    Returns:
        Tuple of floats in input order.

    Raises:
        lapsession.utils.exceptions.SessionDataError: If a value is not numeric
            or the number of laps is wrong.
    """
    if isinstance(values, (str, bytes)):
        msg = "lap_times must be a sequence of numbers, not text"
        raise SessionDataError(msg)
    try:
        raw = tuple(values)
    except TypeError as exc:
        msg = "lap_times must be a sequence of numbers"
        raise SessionDataError(msg) from exc
    if not all(isinstance(value, numbers.Real) for value in raw):
        msg = "lap_times must contain numeric values"
        raise SessionDataError(msg)
    laps = tuple(float(value) for value in raw)
    if len(laps) != LAPS_PER_SESSION:
        msg = f"lap_times must contain exactly {LAPS_PER_SESSION} values, got {len(laps)}"
        raise SessionDataError(msg)
    return laps


@dataclass(frozen=True)
class Session:
    """One completed driving session.

    Args:
        driver_name: Driver label, free text.
        track_name: Track label, free text.
        vehicle: Vehicle member or raw menu integer.
        lap_times: Exactly three lap durations [s]. Zero and negative values
            are accepted as-is.
    """

    driver_name: str
    track_name: str
    vehicle: VehicleChoice
    lap_times: tuple[float, float, float]

    def __post_init__(self) -> None:
        """Normalize lap times to an immutable float tuple."""
        object.__setattr__(self, "lap_times", _coerce_lap_times(self.lap_times))

    @property
    def vehicle_name(self) -> str:
        """Report label of :attr:`vehicle`.

        Returns:
            Vehicle name, ``"Rally"`` for unrecognized values.
        """
        return vehicle_name(self.vehicle)
