"""Synthetic lap times drawn around a vehicle base time."""

from __future__ import annotations

import numpy as np

from lapsession.session.models import VehicleChoice
from lapsession.session.store import get_base_lap_time
from lapsession.simulation.config import LapGeneratorConfig, build_lap_generator_config
from lapsession.utils.constants import LAPS_PER_SESSION


def build_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source used for lap generation.

    Args:
        seed: Optional seed. ``None`` draws fresh OS entropy.

    Returns:
        Independent NumPy generator.
    """
    return np.random.default_rng(seed)


def generate_lap_times(
    vehicle: VehicleChoice,
    rng: np.random.Generator,
    config: LapGeneratorConfig | None = None,
) -> tuple[float, float, float]:
    """Draw three lap times for a vehicle.

    Args:
        vehicle: Vehicle member or raw menu integer.
        rng: Random source supplied by the caller.
        config: Optional generator settings. Defaults to
            :func:`build_lap_generator_config`.

    Returns:
        Three lap times in ``[base, base + config.max_offset]`` [s].
    """
    cfg = config or build_lap_generator_config()
    cfg.validate()
    base = get_base_lap_time(vehicle)
    steps = rng.integers(0, cfg.offset_steps, size=LAPS_PER_SESSION)
    first, second, third = (base + int(step) * cfg.offset_resolution for step in steps)
    return first, second, third
