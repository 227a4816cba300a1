#!/usr/bin/env python3
# cockpitlink/aircraft/tests/test_compile_entries.py

import sys
from pathlib import Path
import unittest
from unittest.mock import MagicMock

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from cockpitlink.aircraft import (
    AH64,
    F16C,
    KA50,
    CapacityExceededError,
    InvalidPointOptionError,
    MissingPointDataError,
)
from cockpitlink.aircraft.constants import KA50Cockpit
from cockpitlink.constants.aircraft import AircraftKind
from cockpitlink.dcs_interface.core import Connected, Disconnected
from cockpitlink.dcs_interface.messages import DCSCommand, DCSMessage
from cockpitlink.geo.data_models import DataEntry, GeoPoint, NavPointSpec


def ka50_entry(entry_id, point_type="Waypoint", xfer=True, lat=12.345, lon=67.89):
    return DataEntry(entry_id, GeoPoint(lat, lon, 152.0, True), xfer=xfer,
                     aircraft_data={AircraftKind.KA50: NavPointSpec(AircraftKind.KA50, point_type)})


class TestKA50Waypoint(unittest.TestCase):
    def setUp(self):
        self.aircraft = KA50()
        self.state = self.aircraft.initial_state()

    def test_single_waypoint_command_order(self):
        report = self.aircraft.compile_entries([ka50_entry(1)], self.state)

        keys = KA50Cockpit.KEYS
        pvi = KA50Cockpit.PVI
        # N 12 20.7, E 067 53.4 into waypoint slot 1
        digits = "1" + "0" + "12207" + "0" + "067534"
        expected = ([DCSCommand(pvi, KA50Cockpit.BUTTONS['WAYPOINTS'], KA50Cockpit.PAGE_DELAY_MS)]
                    + [DCSCommand(pvi, keys[d]) for d in digits]
                    + [DCSCommand(pvi, KA50Cockpit.BUTTONS['ENTER'])])
        self.assertEqual(report.sequence.commands, expected)
        self.assertEqual(report.compiled_ids, [1])
        self.assertEqual(self.state.counters['Waypoint'], 2)

    def test_southern_western_signs(self):
        report = self.aircraft.compile_entries([ka50_entry(1, lat=-12.345, lon=-67.89)], self.state)
        codes = [c.code for c in report.sequence]
        self.assertEqual(codes[2], KA50Cockpit.KEYS['1'])
        self.assertEqual(codes[8], KA50Cockpit.KEYS['1'])

    def test_slots_per_point_type(self):
        entries = [ka50_entry(1), ka50_entry(2, "Target"), ka50_entry(3)]
        report = self.aircraft.compile_entries(entries, self.state)
        self.assertEqual(report.sequence.commands[1].code, KA50Cockpit.KEYS['1'])
        self.assertEqual(report.sequence.commands[17].code, KA50Cockpit.KEYS['1'])
        self.assertEqual(report.sequence.commands[33].code, KA50Cockpit.KEYS['2'])
        self.assertEqual(self.state.counters, {'Waypoint': 3, 'Fixpoint': 1, 'Airfield': 1, 'Target': 2})

    def test_deterministic(self):
        first = self.aircraft.compile_entries([ka50_entry(1)], self.aircraft.initial_state())
        second = KA50().compile_entries([ka50_entry(1)], KA50().initial_state())
        self.assertEqual(DCSMessage(commands=first.sequence.commands).to_json(),
                         DCSMessage(commands=second.sequence.commands).to_json())


class TestCompilationErrors(unittest.TestCase):
    def test_capacity_leaves_counter_untouched(self):
        aircraft = KA50()
        state = aircraft.initial_state()
        state.counters['Fixpoint'] = 5
        before = dict(state.counters)

        report = aircraft.compile_entries([ka50_entry(1, "Fixpoint")], state)

        self.assertEqual(report.sequence.count, 0)
        self.assertEqual(len(report.errors), 1)
        self.assertIsInstance(report.errors[0], CapacityExceededError)
        self.assertEqual(report.errors[0].entry_id, 1)
        self.assertEqual(state.counters, before)

    def test_remaining_entries_still_compile(self):
        aircraft = F16C(starting_steerpoint=698)
        state = aircraft.initial_state()
        entries = [DataEntry(i, GeoPoint(10.0, 20.0)) for i in (1, 2, 3)]

        report = aircraft.compile_entries(entries, state)

        self.assertEqual(report.compiled_ids, [1, 2])
        self.assertEqual([e.entry_id for e in report.errors], [3])
        self.assertEqual(state.counters['steerpoint'], 700)

    def test_missing_point_data(self):
        aircraft = KA50()
        report = aircraft.compile_entries([DataEntry(4, GeoPoint(1.0, 1.0))], aircraft.initial_state())
        self.assertIsInstance(report.errors[0], MissingPointDataError)

    def test_single_point_type_is_implied(self):
        aircraft = F16C()
        report = aircraft.compile_entries([DataEntry(4, GeoPoint(1.0, 1.0))], aircraft.initial_state())
        self.assertEqual(report.errors, [])
        self.assertEqual(report.compiled_ids, [4])

    def test_unknown_point_type(self):
        aircraft = KA50()
        report = aircraft.compile_entries([ka50_entry(1, "Runway")], aircraft.initial_state())
        self.assertIsInstance(report.errors[0], InvalidPointOptionError)

    def test_option_required_when_there_is_a_choice(self):
        aircraft = AH64()
        entry = DataEntry(1, GeoPoint(41.0, 44.0),
                          aircraft_data={AircraftKind.AH64: NavPointSpec(AircraftKind.AH64, "Target")})
        report = aircraft.compile_entries([entry], aircraft.initial_state())
        self.assertIsInstance(report.errors[0], InvalidPointOptionError)

    def test_option_not_offered(self):
        aircraft = AH64()
        entry = DataEntry(1, GeoPoint(41.0, 44.0),
                          aircraft_data={AircraftKind.AH64: NavPointSpec(AircraftKind.AH64, "Target", "WP")})
        report = aircraft.compile_entries([entry], aircraft.initial_state())
        self.assertIsInstance(report.errors[0], InvalidPointOptionError)


class TestSendToDCS(unittest.TestCase):
    def test_only_flagged_entries_are_sent(self):
        aircraft = KA50()
        entries = [ka50_entry(1), ka50_entry(2, "Target", xfer=False), ka50_entry(3, "Fixpoint")]
        connection = MagicMock()
        connection.send_request.return_value = Connected(DCSMessage())

        report = aircraft.send_to_dcs(entries, connection, aircraft.initial_state())

        one = aircraft.compile_entries([entries[0]], aircraft.initial_state()).count
        three = aircraft.compile_entries([entries[2]], aircraft.initial_state()).count
        self.assertEqual(report.count, one + three)
        self.assertEqual(report.compiled_ids, [1, 3])
        self.assertIsInstance(report.outcome, Connected)
        connection.send_request.assert_called_once()
        sent = connection.send_request.call_args[0][0]
        self.assertEqual(len(sent.commands), report.count)
        self.assertNotIn(KA50Cockpit.BUTTONS['TARGETS'], [c.code for c in sent.commands])

    def test_unflagged_entry_leaves_state_alone(self):
        aircraft = KA50()
        state = aircraft.initial_state()
        aircraft.send_to_dcs([ka50_entry(2, "Target", xfer=False)], MagicMock(), state)
        self.assertEqual(state.counters['Target'], 1)

    def test_nothing_to_send(self):
        aircraft = KA50()
        connection = MagicMock()
        report = aircraft.send_to_dcs([], connection, aircraft.initial_state())
        self.assertEqual(report.count, 0)
        self.assertIsNone(report.outcome)
        connection.send_request.assert_not_called()

    def test_undelivered_sequence(self):
        aircraft = KA50()
        connection = MagicMock()
        connection.send_request.return_value = Disconnected("ConnectionRefusedError")
        report = aircraft.send_to_dcs([ka50_entry(1)], connection, aircraft.initial_state())
        self.assertGreater(report.count, 0)
        self.assertIsInstance(report.outcome, Disconnected)


if __name__ == '__main__':
    unittest.main()
