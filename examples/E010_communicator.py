# /examples/E010_communicator.py

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from cockpitlink.dcs_interface import DCSConnection, DCSMessage, Connected

# Ask the export script for the camera position and the occupied unit
conn = DCSConnection()
result = conn.send_request(DCSMessage(fetch_camera_position=True, fetch_aircraft_type=True))
if not isinstance(result, Connected):
    print(f"Failed: {result.reason}")
    exit(1)

response = result.response
print(f"Response Raw:\n{response.to_json()}")

if response.server_errors:
    print(f"DCS reported: {response.server_errors[0]}")
if response.camera_position:
    print(f"Camera latitude: {response.camera_position.lat}")
    print(f"Camera longitude: {response.camera_position.lon}")
print(f"Aircraft: {response.aircraft_type or 'none'}")
