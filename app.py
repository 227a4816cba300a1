# app.py
import logging
import threading
import os
import time
from pathlib import Path
from flask import Flask, jsonify, request

# Core Application Imports
from cockpitlink.constants.aircraft import AircraftKind
from cockpitlink.constants.connection import DCSConnectionConstants
from cockpitlink.dcs_interface import Connected, DCSConnection
from cockpitlink.aircraft import AH64, AircraftException, create_aircraft
from cockpitlink.geo.storage import entry_from_dict, load_entries
from cockpitlink.transfer import LiveStatePoller, TransferOrchestrator

app = Flask(__name__)
log = logging.getLogger('werkzeug')
log.setLevel(logging.WARNING)

DCS_HOST = os.environ.get('COCKPITLINK_HOST', DCSConnectionConstants.DEFAULT_HOST)
DCS_PORT = int(os.environ.get('COCKPITLINK_PORT', DCSConnectionConstants.DEFAULT_PORT))
# Saved entry lists can only be loaded from here
DATA_DIR = Path(os.environ.get('COCKPITLINK_DATA_DIR', 'data')).resolve()

connection = DCSConnection(host=DCS_HOST, port=DCS_PORT)
orchestrator = TransferOrchestrator(connection)

# Global State Dictionary
state = {
    'connection': connection,
    'orchestrator': orchestrator,
    'poller': LiveStatePoller(connection, orchestrator),
    'stop_event': threading.Event(),
    'data_dir': DATA_DIR,
}


def _format_response(success: bool, message: str, data: dict = None, status: int = 200):
    return jsonify({
        'module': 'cockpitlink',
        'success': success,
        'message': message,
        'data': data or {},
        'timestamp': time.time()
    }), status


def _point_types(aircraft) -> dict:
    return {point_type: aircraft.get_point_options_for_type(point_type)
            for point_type in aircraft.get_point_types()}


def _entries_path(name: str) -> Path:
    data_dir = Path(state['data_dir']).resolve()
    path = (data_dir / str(name)).resolve()
    if data_dir not in path.parents:
        raise PermissionError(f"{name} is outside the data directory")
    return path



@app.route('/status')
def status():
    poller = state['poller']
    progress = state['orchestrator'].progress()
    aircraft = state['orchestrator'].aircraft
    return _format_response(True, poller.status.text, {
        'status': poller.status.to_dict(),
        'aircraft': aircraft.kind.value if aircraft else None,
        'aircraftPinned': state['orchestrator'].aircraft_pinned,
        'progress': {'active': progress.active, 'current': progress.current, 'total': progress.total},
    })


@app.route('/aircraft', methods=['POST'])
def select_aircraft():
    data = request.get_json(silent=True) or {}
    kind_name = data.get('kind')
    options = data.get('options') or {}

    if kind_name is None:
        state['orchestrator'].select_aircraft(None)
        return _format_response(True, "Aircraft cleared, auto-detection resumed")

    try:
        kind = AircraftKind(kind_name)
        aircraft = create_aircraft(kind, **options)
    except ValueError as e:
        return _format_response(False, f"Invalid aircraft selection: {e}", {'kind': kind_name}, 400)
    except TypeError as e:
        return _format_response(False, f"Invalid options for {kind_name}: {e}", {'options': options}, 400)

    # Auto-detection of this kind later on reuses the same options
    state['poller'].aircraft_options[kind] = options
    state['orchestrator'].select_aircraft(aircraft, pinned=True)
    return _format_response(True, f"{kind.value} selected", {'pointTypes': _point_types(aircraft)})


@app.route('/aircraft/point_types')
def point_types():
    aircraft = state['orchestrator'].aircraft
    if aircraft is None:
        return _format_response(False, "Need to select aircraft type.", status=409)
    return _format_response(True, f"Point types for {aircraft.kind.value}", {
        'aircraft': aircraft.kind.value,
        'pointTypes': _point_types(aircraft),
    })


@app.route('/transfer', methods=['POST'])
def transfer():
    data = request.get_json(silent=True) or {}
    try:
        if 'path' in data:
            entries = load_entries(_entries_path(data['path']))
        else:
            entries = [entry_from_dict(item) for item in data.get('entries', [])]
    except PermissionError as e:
        logging.warning(f"Refused to read entries: {e}")
        return _format_response(False, str(e), {'error_type': type(e).__name__}, 403)
    except (OSError, ValueError, KeyError, TypeError) as e:
        logging.error(f"Could not read entries: {e}")
        return _format_response(False, f"Could not read entries: {e}", {'error_type': type(e).__name__}, 400)

    try:
        result = state['orchestrator'].start_transfer(entries)
    except AircraftException as e:
        return _format_response(False, str(e), {'error_type': type(e).__name__}, 409)

    if not result.total:
        return _format_response(False, "Nothing to transfer", result.to_dict())
    if not result.delivered:
        return _format_response(False, "Not connected", result.to_dict(), 503)
    return _format_response(True, f"Transferring {result.total} commands", result.to_dict())


@app.route('/stop', methods=['POST'])
def stop():
    state['orchestrator'].stop_transfer()
    return _format_response(True, "Stop requested")


@app.route('/ah64/delete_points', methods=['POST'])
def ah64_delete_points():
    aircraft = state['orchestrator'].aircraft
    if not isinstance(aircraft, AH64):
        return _format_response(False, "AH-64D must be selected to delete points", status=409)

    data = request.get_json(silent=True) or {}
    try:
        sequence = aircraft.compile_point_deletion(data.get('point_type'), int(data['first']), int(data['last']))
    except (KeyError, TypeError, ValueError) as e:
        return _format_response(False, f"Invalid deletion range: {e}", status=400)
    except AircraftException as e:
        return _format_response(False, str(e), {'error_type': type(e).__name__}, 400)

    delivered = isinstance(state['orchestrator'].play(sequence), Connected)
    if not delivered:
        return _format_response(False, "Not connected", {'total': sequence.count}, 503)
    return _format_response(True, f"Deleting points with {sequence.count} commands", {'total': sequence.count})


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    logging.info(f"Polling DCS at {DCS_HOST}:{DCS_PORT}")
    threading.Thread(target=state['poller'].run, args=(state['stop_event'],), daemon=True).start()
    try:
        app.run(debug=True, use_reloader=False)
    finally:
        state['stop_event'].set()
