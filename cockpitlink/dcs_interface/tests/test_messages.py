#!/usr/bin/env python3
# cockpitlink/dcs_interface/tests/test_messages.py

import json
import sys
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from cockpitlink.dcs_interface.exceptions import MessageFormatError, ProtocolError
from cockpitlink.dcs_interface.messages import (
    CameraPosition,
    DCSCommand,
    DCSMessage,
    WeaponStation,
    parse_bool_text,
)


class TestDCSCommand(unittest.TestCase):
    def test_add_depress_is_text_on_the_wire(self):
        self.assertEqual(DCSCommand(20, 3011, 100, 1, True).to_dict()["addDepress"], "true")
        self.assertEqual(DCSCommand(17, 3033, 0, -1, False).to_dict()["addDepress"], "false")

    def test_encode_decode_keeps_all_fields(self):
        command = DCSCommand(device=17, code=3032, delay=250, activate=-1, add_depress=False)
        self.assertEqual(DCSCommand.from_dict(command.to_dict()), command)

    def test_add_depress_any_case(self):
        base = {"device": 1, "code": 2, "delay": 0, "activate": 1}
        self.assertTrue(DCSCommand.from_dict({**base, "addDepress": "TRUE"}).add_depress)
        self.assertFalse(DCSCommand.from_dict({**base, "addDepress": "False"}).add_depress)

    def test_add_depress_rejects_other_text(self):
        base = {"device": 1, "code": 2, "delay": 0, "activate": 1}
        with self.assertRaises(MessageFormatError) as ctx:
            DCSCommand.from_dict({**base, "addDepress": "yes"})
        self.assertEqual(ctx.exception.field_name, "addDepress")

    def test_native_booleans_are_not_accepted(self):
        with self.assertRaises(MessageFormatError):
            parse_bool_text(True, "addDepress")
        with self.assertRaises(MessageFormatError):
            parse_bool_text(None, "addDepress")

    def test_activate_must_be_plus_or_minus_one(self):
        with self.assertRaises(MessageFormatError):
            DCSCommand(1, 2, activate=0)

    def test_negative_delay(self):
        with self.assertRaises(MessageFormatError):
            DCSCommand(1, 2, delay=-1)

    def test_integer_fields(self):
        with self.assertRaises(MessageFormatError):
            DCSCommand.from_dict({"device": "17", "code": 2, "delay": 0, "activate": 1, "addDepress": "true"})

    def test_str(self):
        self.assertEqual(str(DCSCommand(25, 3029, 0, 1, True)), "D:25, C:3029, Dly: 0, Ac:1, Dp: 1")


class TestDCSMessage(unittest.TestCase):
    def test_request_is_one_compact_line(self):
        message = DCSMessage(fetch_camera_position=True, commands=[DCSCommand(9, 3011)])
        text = message.to_json()
        self.assertNotIn("\n", text)
        self.assertNotIn(" ", text)
        data = json.loads(text)
        self.assertTrue(data["fetchCameraPosition"])
        self.assertFalse(data["stop"])
        self.assertNotIn("cameraPosition", data)
        self.assertNotIn("serverErrors", data)
        self.assertEqual(data["commands"][0]["addDepress"], "true")

    def test_response_decoding(self):
        reply = json.dumps({
            "cameraPosition": {"lat": 41.5, "lon": 44.25, "alt": 1500.0, "elevation": 480.0},
            "aircraftType": "FA-18C_hornet",
            "weaponStations": [{"station": 2, "type": "GBU-38"}],
            "serverErrors": ["Lua error"],
            "currentCommandIndex": 12,
            "isF10View": False,
        })
        message = DCSMessage.from_json(reply)
        self.assertEqual(message.camera_position, CameraPosition(41.5, 44.25, 1500.0, 480.0))
        self.assertEqual(message.aircraft_type, "FA-18C_hornet")
        self.assertEqual(message.weapon_stations, [WeaponStation(2, "GBU-38")])
        self.assertEqual(message.server_errors, ["Lua error"])
        self.assertEqual(message.current_command_index, 12)
        self.assertFalse(message.is_f10_view)

    def test_absent_response_fields(self):
        message = DCSMessage.from_json("{}")
        self.assertIsNone(message.camera_position)
        self.assertIsNone(message.aircraft_type)
        self.assertIsNone(message.weapon_stations)
        self.assertEqual(message.server_errors, [])
        self.assertIsNone(message.current_command_index)

    def test_camera_position_without_altitudes(self):
        message = DCSMessage.from_json('{"cameraPosition": {"lat": 1, "lon": 2}}')
        self.assertEqual(message.camera_position.to_dict(), {"lat": 1.0, "lon": 2.0})

    def test_malformed_json(self):
        with self.assertRaises(ProtocolError):
            DCSMessage.from_json('{"cameraPosition": ')

    def test_wrong_shapes(self):
        for reply in ('[]', '{"serverErrors": "boom"}', '{"currentCommandIndex": "3"}',
                      '{"weaponStations": {"station": 1}}', '{"cameraPosition": {"lat": 1}}',
                      '{"weaponStations": [{"station": 1}]}', '{"aircraftType": ["F-16C_50"]}',
                      '{"aircraftType": 16}', '{"isF10View": "yes"}', '{"isF10View": 1}'):
            with self.subTest(reply=reply):
                with self.assertRaises(MessageFormatError):
                    DCSMessage.from_json(reply)


if __name__ == '__main__':
    unittest.main()
