"""Lap-time generator configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from lapsession.utils.exceptions import ConfigurationError

DEFAULT_OFFSET_STEPS = 1000
DEFAULT_OFFSET_RESOLUTION = 0.01


@dataclass(frozen=True)
class LapGeneratorConfig:
    """Controls for synthesizing lap times around a vehicle base time.

    Each lap is ``base + k * offset_resolution`` with ``k`` drawn uniformly
    from ``[0, offset_steps)``.

    Args:
        offset_steps: Number of distinct offsets that can be drawn.
        offset_resolution: Size of one offset step [s].
    """

    offset_steps: int = DEFAULT_OFFSET_STEPS
    offset_resolution: float = DEFAULT_OFFSET_RESOLUTION

    @property
    def max_offset(self) -> float:
        """Largest offset that can be added to a base time.

        Returns:
            Maximum lap-time offset [s].
        """
        return (self.offset_steps - 1) * self.offset_resolution

    def validate(self) -> None:
        """Validate generator settings.

        Raises:
            lapsession.utils.exceptions.ConfigurationError: If any value
                violates its bound.
        """
        if self.offset_steps < 1:
            msg = "offset_steps must be at least 1"
            raise ConfigurationError(msg)
        if self.offset_resolution <= 0.0:
            msg = "offset_resolution must be positive"
            raise ConfigurationError(msg)


def build_lap_generator_config(
    offset_steps: int = DEFAULT_OFFSET_STEPS,
    offset_resolution: float = DEFAULT_OFFSET_RESOLUTION,
) -> LapGeneratorConfig:
    """Build a validated generator config.

    Args:
        offset_steps: Number of distinct offsets that can be drawn.
        offset_resolution: Size of one offset step [s].

    Returns:
        Fully validated generator configuration.

    Raises:
        lapsession.utils.exceptions.ConfigurationError: If a value violates
            its bound.
    """
    config = LapGeneratorConfig(
        offset_steps=offset_steps,
        offset_resolution=offset_resolution,
    )
    config.validate()
    return config
