"""Lap-time synthesis."""

from lapsession.simulation.config import LapGeneratorConfig, build_lap_generator_config
from lapsession.simulation.generator import build_rng, generate_lap_times

__all__ = [
    "LapGeneratorConfig",
    "build_lap_generator_config",
    "build_rng",
    "generate_lap_times",
]
