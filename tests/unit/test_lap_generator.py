"""Unit tests for seeded lap-time generation."""

from __future__ import annotations

import unittest

from lapsession.session.models import VehicleType
from lapsession.simulation import (
    LapGeneratorConfig,
    build_lap_generator_config,
    build_rng,
    generate_lap_times,
)
from lapsession.utils.exceptions import ConfigurationError


class LapGeneratorTests(unittest.TestCase):
    """Lap synthesis around vehicle base times."""

    def test_laps_stay_within_offset_window(self) -> None:
        """Draw laps between the base time and the largest offset."""
        rng = build_rng(7)
        for vehicle, base in (
            (VehicleType.GT3, 95.0),
            (VehicleType.Formula, 70.0),
            (VehicleType.Rally, 120.0),
            (4, 120.0),
        ):
            with self.subTest(vehicle=vehicle):
                for _ in range(50):
                    laps = generate_lap_times(vehicle, rng)
                    self.assertEqual(len(laps), 3)
                    for lap in laps:
                        self.assertGreaterEqual(lap, base)
                        self.assertLessEqual(lap, base + 9.99 + 1e-9)

    def test_offsets_lie_on_hundredth_grid(self) -> None:
        """Quantize offsets to 0.01 s."""
        laps = generate_lap_times(VehicleType.Formula, build_rng(3))
        for lap in laps:
            steps = (lap - 70.0) * 100.0
            self.assertAlmostEqual(steps, round(steps), places=6)

    def test_same_seed_reproduces_laps(self) -> None:
        """Return identical laps for identical seeds."""
        first = generate_lap_times(VehicleType.GT3, build_rng(42))
        second = generate_lap_times(VehicleType.GT3, build_rng(42))
        self.assertEqual(first, second)

    def test_single_step_config_returns_base_time(self) -> None:
        """Collapse the offset window when only one step exists."""
        config = build_lap_generator_config(offset_steps=1)
        laps = generate_lap_times(VehicleType.Rally, build_rng(0), config)
        self.assertEqual(laps, (120.0, 120.0, 120.0))
        self.assertEqual(config.max_offset, 0.0)

    def test_config_validation_rejects_invalid_values(self) -> None:
        """Raise configuration errors for non-positive settings."""
        with self.assertRaises(ConfigurationError):
            build_lap_generator_config(offset_steps=0)
        with self.assertRaises(ConfigurationError):
            build_lap_generator_config(offset_resolution=0.0)
        with self.assertRaises(ConfigurationError):
            generate_lap_times(VehicleType.GT3, build_rng(0), LapGeneratorConfig(offset_steps=-5))

    def test_default_config_max_offset(self) -> None:
        """Expose the default 9.99 s offset ceiling."""
        self.assertAlmostEqual(LapGeneratorConfig().max_offset, 9.99)


if __name__ == "__main__":
    unittest.main()
