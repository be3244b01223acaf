"""Utility helpers."""

from lapsession.utils.constants import LAPS_PER_SESSION, MAX_SESSIONS
from lapsession.utils.logging import configure_logging

__all__ = ["LAPS_PER_SESSION", "MAX_SESSIONS", "configure_logging"]
