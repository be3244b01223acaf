"""Unit tests for the bounded session store and its averages."""

from __future__ import annotations

import unittest

from lapsession.session.models import Session, VehicleType
from lapsession.session.store import SessionStore, calculate_average_lap, get_base_lap_time
from lapsession.utils.constants import MAX_SESSIONS
from tests.helpers import sample_session


class AverageLapTests(unittest.TestCase):
    """Session average behavior."""

    def test_average_lap_matches_mean_of_three_laps(self) -> None:
        """Average three laps without rounding."""
        store = SessionStore()
        self.assertAlmostEqual(store.calculate_average_lap(sample_session()), 100.0)

    def test_average_lap_is_exact_sum_over_three(self) -> None:
        """Match ``(a + b + c) / 3.0`` bit for bit."""
        laps = (95.37, 101.11, 97.05)
        session = sample_session(lap_times=laps)
        self.assertEqual(calculate_average_lap(session), (laps[0] + laps[1] + laps[2]) / 3.0)

    def test_zero_lap_times_average_to_zero(self) -> None:
        """Accept all-zero laps without error."""
        session = Session("Z", "Z", VehicleType.GT3, (0.0, 0.0, 0.0))
        self.assertEqual(SessionStore().calculate_average_lap(session), 0.0)

    def test_negative_lap_times_are_averaged(self) -> None:
        """Average negative laps as plain numbers."""
        session = sample_session(lap_times=(-3.0, 0.0, 6.0))
        self.assertEqual(calculate_average_lap(session), 1.0)

    def test_average_lap_has_no_side_effects(self) -> None:
        """Return identical results on repeated calls."""
        store = SessionStore()
        session = sample_session(lap_times=(71.3, 69.9, 70.4))
        first = store.calculate_average_lap(session)
        second = store.calculate_average_lap(session)
        self.assertEqual(first, second)
        self.assertEqual(session.lap_times, (71.3, 69.9, 70.4))
        self.assertEqual(store.session_count, 0)


class OverallAverageTests(unittest.TestCase):
    """Store-wide average behavior."""

    def test_empty_store_overall_average_is_zero(self) -> None:
        """Return exactly ``0.0`` when nothing is stored."""
        self.assertEqual(SessionStore().calculate_overall_average(), 0.0)

    def test_overall_average_with_one_session(self) -> None:
        """Average the laps of a single stored session."""
        store = SessionStore()
        store.add_session(Session("A", "B", VehicleType.Formula, (70.0, 71.0, 69.0)))
        self.assertAlmostEqual(store.calculate_overall_average(), 70.0)

    def test_overall_average_spans_all_stored_laps(self) -> None:
        """Weight every stored lap equally."""
        store = SessionStore()
        store.add_session(sample_session(lap_times=(90.0, 90.0, 90.0)))
        store.add_session(sample_session(lap_times=(120.0, 120.0, 121.5)))
        self.assertAlmostEqual(store.calculate_overall_average(), 105.25)

    def test_rejected_session_does_not_change_overall_average(self) -> None:
        """Ignore sessions refused at capacity."""
        store = SessionStore()
        for _ in range(MAX_SESSIONS):
            store.add_session(sample_session(lap_times=(1.0, 1.0, 1.0)))
        store.add_session(sample_session(lap_times=(500.0, 500.0, 500.0)))
        self.assertAlmostEqual(store.calculate_overall_average(), 1.0)


class BaseLapTimeTests(unittest.TestCase):
    """Vehicle base-time lookup."""

    def test_known_vehicle_base_times(self) -> None:
        """Map each vehicle class to its reference time."""
        store = SessionStore()
        self.assertEqual(store.get_base_lap_time(VehicleType.GT3), 95.0)
        self.assertEqual(store.get_base_lap_time(VehicleType.Formula), 70.0)
        self.assertEqual(store.get_base_lap_time(VehicleType.Rally), 120.0)

    def test_out_of_range_values_fall_back_to_rally(self) -> None:
        """Route unrecognized menu values to the Rally base time."""
        for value in (0, 4, -1, 99):
            with self.subTest(value=value):
                self.assertEqual(get_base_lap_time(value), 120.0)

    def test_plain_integers_match_enum_members(self) -> None:
        """Treat menu integers 1 and 2 like their vehicle members."""
        self.assertEqual(get_base_lap_time(1), 95.0)
        self.assertEqual(get_base_lap_time(2), 70.0)


class CapacityTests(unittest.TestCase):
    """Insertion and capacity handling."""

    def test_session_count_starts_at_zero(self) -> None:
        """Create stores empty."""
        store = SessionStore()
        self.assertEqual(store.get_session_count(), 0)
        self.assertEqual(len(store), 0)
        self.assertFalse(store.is_full)

    def test_adding_session_increases_count(self) -> None:
        """Report success and count one stored session."""
        store = SessionStore()
        self.assertTrue(store.add_session(Session("OK", "OK", VehicleType.Rally, (100, 100, 100))))
        self.assertEqual(store.get_session_count(), 1)

    def test_session_limit_enforced(self) -> None:
        """Accept five sessions and reject the sixth."""
        store = SessionStore()
        session = Session("X", "Y", VehicleType.GT3, (1.0, 1.0, 1.0))
        for _ in range(MAX_SESSIONS):
            self.assertTrue(store.add_session(session))
        with self.assertLogs("lapsession.session.store", level="WARNING"):
            self.assertFalse(store.add_session(session))
        self.assertEqual(store.get_session_count(), MAX_SESSIONS)
        self.assertTrue(store.is_full)
        self.assertEqual(store.capacity, MAX_SESSIONS)

    def test_sessions_keep_insertion_order(self) -> None:
        """Expose stored sessions in the order they were added."""
        store = SessionStore()
        drivers = ["first", "second", "third"]
        for driver in drivers:
            store.add_session(Session(driver, "T", VehicleType.GT3, (90.0, 90.0, 90.0)))
        self.assertEqual([session.driver_name for session in store], drivers)
        self.assertEqual([session.driver_name for session in store.sessions], drivers)

    def test_sessions_holds_only_stored_entries(self) -> None:
        """Expose exactly the filled slots of the store."""
        store = SessionStore()
        self.assertEqual(store.sessions, ())
        session = sample_session()
        store.add_session(session)
        self.assertEqual(store.sessions, (session,))

    def test_stored_copy_ignores_caller_changes(self) -> None:
        """Keep stored lap times independent from the caller's list."""
        laps = [80.0, 81.0, 82.0]
        store = SessionStore()
        store.add_session(Session("A", "T", VehicleType.GT3, laps))
        laps[0] = 1000.0
        self.assertEqual(store.sessions[0].lap_times, (80.0, 81.0, 82.0))
        self.assertAlmostEqual(store.calculate_overall_average(), 81.0)


if __name__ == "__main__":
    unittest.main()
