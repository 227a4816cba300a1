#!/usr/bin/env python3
# /examples/E020_transfer_waypoints.py
"""
Compiles three waypoints for the F-16C, sends the two flagged for transfer
and follows the playback progress until DCS is done.
"""
import logging
import sys
import time
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from cockpitlink.aircraft import F16C
from cockpitlink.dcs_interface import DCSConnection
from cockpitlink.geo import DataEntry, GeoPoint
from cockpitlink.transfer import LiveStatePoller, TransferOrchestrator

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

ENTRIES = [
    DataEntry(1, GeoPoint(41.9285, 41.8615, 30.0, False, "Batumi")),
    DataEntry(2, GeoPoint(42.1760, 42.4820, 45.0, False, "Kutaisi"), xfer=False),
    DataEntry(3, GeoPoint(41.6690, 44.9547, 470.0, False, "Tbilisi")),
]


def main():
    conn = DCSConnection()
    orchestrator = TransferOrchestrator(conn)
    orchestrator.select_aircraft(F16C(starting_steerpoint=20))
    poller = LiveStatePoller(conn, orchestrator, auto_detect=False)

    result = orchestrator.start_transfer(ENTRIES)
    for error in result.errors:
        print(f"Entry {error.entry_id} skipped: {error}")
    if not result.delivered:
        print(f"Nothing delivered ({result.total} commands compiled). Is DCS running?")
        return

    while orchestrator.progress().active:
        time.sleep(poller.period)
        status = poller.tick()
        progress = orchestrator.progress()
        print(f"{status.text if status else '...'} | {progress.current}/{progress.total}")
    print("Transfer finished.")


if __name__ == '__main__':
    main()
