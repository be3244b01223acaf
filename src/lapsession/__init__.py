"""Motorsport lap session recording package."""

from lapsession.analysis.summary import SessionSummary, summarize_session
from lapsession.session import Session, SessionStore, VehicleType, get_base_lap_time

__all__ = [
    "Session",
    "SessionStore",
    "SessionSummary",
    "VehicleType",
    "get_base_lap_time",
    "summarize_session",
]
