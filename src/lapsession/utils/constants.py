"""Fixed limits and reference values used across the package."""

MAX_SESSIONS: int = 5
LAPS_PER_SESSION: int = 3

GT3_BASE_LAP_TIME: float = 95.0
FORMULA_BASE_LAP_TIME: float = 70.0
RALLY_BASE_LAP_TIME: float = 120.0
