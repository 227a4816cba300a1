#!/usr/bin/env python3
# cockpitlink/dcs_interface/tests/test_dcs_connection.py

import json
import socket
import sys
import threading
import time
from pathlib import Path
import unittest
from unittest.mock import patch

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from cockpitlink.dcs_interface.core import Connected, DCSConnection, Disconnected
from cockpitlink.dcs_interface.exceptions import ConnectionTimeout, ProtocolError
from cockpitlink.dcs_interface.messages import DCSCommand, DCSMessage
from cockpitlink.dcs_interface.protocols.tcp import JsonLineProtocol


def unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class FakeExportScript:
    """Loopback stand-in for the DCS export script: one request line in, handler's bytes out."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []
        self._server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._server.bind(("127.0.0.1", 0))
        self._server.listen(5)
        self._server.settimeout(0.05)
        self.port = self._server.getsockname()[1]
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self):
        while not self._stop.is_set():
            try:
                conn, _ = self._server.accept()
            except socket.timeout:
                continue
            with conn:
                conn.settimeout(1.0)
                data = b""
                while b"\n" not in data:
                    chunk = conn.recv(4096)
                    if not chunk:
                        break
                    data += chunk
                self.requests.append(json.loads(data.split(b"\n")[0].decode("utf-8")))
                reply = self.handler(self.requests[-1])
                if reply:
                    try:
                        conn.sendall(reply)
                    except OSError:
                        pass

    def close(self):
        self._stop.set()
        self._thread.join(timeout=2.0)
        self._server.close()


class TestDCSConnection(unittest.TestCase):
    def start_host(self, handler):
        host = FakeExportScript(handler)
        self.addCleanup(host.close)
        return host, DCSConnection(host="127.0.0.1", port=host.port, timeout=0.2)

    def test_connected_reply(self):
        reply = b'{"cameraPosition":{"lat":41.5,"lon":44.25},"currentCommandIndex":3}\n'
        host, conn = self.start_host(lambda request: reply)

        result = conn.send_request(DCSMessage(fetch_camera_position=True))

        self.assertIsInstance(result, Connected)
        self.assertEqual(result.response.camera_position.lat, 41.5)
        self.assertEqual(result.response.current_command_index, 3)
        self.assertTrue(host.requests[0]["fetchCameraPosition"])

    def test_commands_reach_the_host(self):
        host, conn = self.start_host(lambda request: b"{}\n")
        conn.send_request(DCSMessage(commands=[DCSCommand(20, 3011, 100), DCSCommand(17, 3033, 0, -1, False)]))
        self.assertEqual(host.requests[0]["commands"], [
            {"device": 20, "code": 3011, "delay": 100, "activate": 1, "addDepress": "true"},
            {"device": 17, "code": 3033, "delay": 0, "activate": -1, "addDepress": "false"},
        ])

    def test_server_errors_are_still_connected(self):
        _, conn = self.start_host(lambda request: b'{"serverErrors":["Bad command"]}\n')
        result = conn.send_request(DCSMessage())
        self.assertIsInstance(result, Connected)
        self.assertEqual(result.response.server_errors, ["Bad command"])

    def test_reply_ended_by_close(self):
        _, conn = self.start_host(lambda request: b'{"aircraftType":"Ka-50_3"}')
        result = conn.send_request(DCSMessage(fetch_aircraft_type=True))
        self.assertIsInstance(result, Connected)
        self.assertEqual(result.response.aircraft_type, "Ka-50_3")

    def test_unreachable_port(self):
        conn = DCSConnection(host="127.0.0.1", port=unused_port(), timeout=0.2)
        started = time.monotonic()
        result = conn.send_request(DCSMessage(fetch_camera_position=True))
        self.assertIsInstance(result, Disconnected)
        self.assertLess(time.monotonic() - started, 1.0)

    def test_silent_host_times_out(self):
        def never_answer(request):
            time.sleep(0.5)
            return None
        _, conn = self.start_host(never_answer)

        started = time.monotonic()
        result = conn.send_request(DCSMessage())

        self.assertIsInstance(result, Disconnected)
        self.assertIn("ConnectionTimeout", result.reason)
        self.assertLess(time.monotonic() - started, 0.45)

    def test_garbage_reply(self):
        _, conn = self.start_host(lambda request: b"not json\n")
        result = conn.send_request(DCSMessage())
        self.assertIsInstance(result, Disconnected)
        self.assertIn("ProtocolError", result.reason)

    def test_bad_envelope_reply(self):
        _, conn = self.start_host(lambda request: b'{"commands":[{"device":1,"code":2,"delay":0,'
                                                  b'"activate":1,"addDepress":"yes"}]}\n')
        result = conn.send_request(DCSMessage())
        self.assertIsInstance(result, Disconnected)
        self.assertIn("MessageFormatError", result.reason)

    def test_repeated_polls(self):
        host, conn = self.start_host(lambda request: b"{}\n")
        for _ in range(20):
            self.assertIsInstance(conn.send_request(DCSMessage(fetch_camera_position=True)), Connected)
        self.assertEqual(len(host.requests), 20)

    def test_requests_are_serialized(self):
        active = []
        overlaps = []

        def exchange(payload):
            active.append(payload)
            if len(active) > 1:
                overlaps.append(payload)
            time.sleep(0.02)
            active.remove(payload)
            return "{}"

        conn = DCSConnection(port=unused_port())
        with patch.object(conn._protocol, 'exchange', side_effect=exchange):
            threads = [threading.Thread(target=conn.send_request, args=(DCSMessage(),)) for _ in range(5)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
        self.assertEqual(overlaps, [])


class TestJsonLineProtocol(unittest.TestCase):
    def test_oversized_reply(self):
        host = FakeExportScript(lambda request: b"x" * 5000)
        self.addCleanup(host.close)
        protocol = JsonLineProtocol("127.0.0.1", host.port, timeout=0.5, max_bytes=1024)
        with self.assertRaises(ProtocolError):
            protocol.exchange("{}")

    def test_closed_without_reply(self):
        host = FakeExportScript(lambda request: None)
        self.addCleanup(host.close)
        protocol = JsonLineProtocol("127.0.0.1", host.port, timeout=0.5)
        with self.assertRaises(ProtocolError):
            protocol.exchange("{}")

    def test_timeout(self):
        host = FakeExportScript(lambda request: time.sleep(0.4))
        self.addCleanup(host.close)
        protocol = JsonLineProtocol("127.0.0.1", host.port, timeout=0.1)
        with self.assertRaises(ConnectionTimeout):
            protocol.exchange("{}")


if __name__ == '__main__':
    unittest.main()
