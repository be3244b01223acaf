"""Session records, vehicle lookup and the bounded session store."""

from lapsession.session.models import (
    Session,
    VehicleChoice,
    VehicleType,
    parse_vehicle_choice,
    resolve_vehicle,
    vehicle_name,
)
from lapsession.session.store import SessionStore, calculate_average_lap, get_base_lap_time

__all__ = [
    "Session",
    "SessionStore",
    "VehicleChoice",
    "VehicleType",
    "calculate_average_lap",
    "get_base_lap_time",
    "parse_vehicle_choice",
    "resolve_vehicle",
    "vehicle_name",
]
