# cockpitlink/transfer/poller.py

import logging
import threading
import time
from typing import Callable, Dict, Optional

from .core import TransferOrchestrator
from .data_models import DCSStatus, StatusKind
from ..aircraft.exceptions import UnknownAircraftError
from ..aircraft.registry import create_aircraft, kind_for_model
from ..constants.aircraft import AircraftKind, METERS_PER_FOOT
from ..constants.connection import DCSConnectionConstants
from ..dcs_interface.core import Connected, ConnectionResult, DCSConnection
from ..dcs_interface.messages import CameraPosition, DCSMessage

logger = logging.getLogger(__name__)

NOT_CONNECTED_TEXT = "Not connected"
NO_COORDINATES_TEXT = "Connected, but no coordinates"


def format_camera_position(position: CameraPosition) -> str:
    """Camera position as status text, e.g. "N 12.345000 E 067.890000, 500 ft"."""
    text = (f"{'N' if position.lat >= 0 else 'S'} {abs(position.lat):09.6f} "
            f"{'E' if position.lon >= 0 else 'W'} {abs(position.lon):010.6f}")
    elevation = position.elevation if position.elevation is not None else position.alt
    if elevation is not None:
        text += f", {round(elevation / METERS_PER_FOOT)} ft"
    return text


class LiveStatePoller:
    """
    Polls the export script on a fixed period and derives the connection status.

    Single flight: a tick that finds the previous poll still outstanding does
    nothing. Each poll also feeds the transfer progress, the auto-detected
    aircraft and the F/A-18C weapon stations.
    """

    def __init__(self, connection: DCSConnection, orchestrator: TransferOrchestrator,
                 period: float = DCSConnectionConstants.POLL_PERIOD_S,
                 error_hold: float = DCSConnectionConstants.ERROR_HOLD_S,
                 auto_detect: bool = True,
                 aircraft_options: Optional[Dict[AircraftKind, dict]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.connection = connection
        self.orchestrator = orchestrator
        self.period = period
        self.error_hold = error_hold
        self.auto_detect = auto_detect
        self.aircraft_options = aircraft_options or {}
        self._clock = clock

        self.status = DCSStatus(StatusKind.NOT_CONNECTED, NOT_CONNECTED_TEXT)
        self._in_flight = threading.Lock()
        self._held_error: Optional[str] = None
        self._held_until = 0.0
        self._unknown_model: Optional[str] = None

    def build_request(self) -> DCSMessage:
        aircraft = self.orchestrator.aircraft
        return DCSMessage(
            fetch_camera_position=True,
            fetch_aircraft_type=self.auto_detect and not self.orchestrator.aircraft_pinned,
            fetch_weapon_stations=aircraft is not None and aircraft.tracks_weapon_stations,
        )

    def tick(self) -> Optional[DCSStatus]:
        """Runs one poll. Returns the new status, or None if the previous poll is still in flight."""
        if not self._in_flight.acquire(blocking=False):
            logger.debug("Poll still in flight, tick skipped")
            return None
        try:
            request = self.build_request()
            generation = self.orchestrator.poll_generation()
            result = self.connection.send_request(request)
            self.status = self._derive_status(request, result, generation)
        finally:
            self._in_flight.release()
        return self.status

    def run(self, stop_event: threading.Event) -> None:
        logger.info(f"Live state poller started ({self.period * 1000:.0f} ms)")
        while not stop_event.is_set():
            started = time.monotonic()
            self.tick()
            stop_event.wait(max(0.0, self.period - (time.monotonic() - started)))
        logger.info("Live state poller stopped")

    def _derive_status(self, request: DCSMessage, result: ConnectionResult,
                       generation: Optional[int] = None) -> DCSStatus:
        if not isinstance(result, Connected):
            return DCSStatus(StatusKind.NOT_CONNECTED, NOT_CONNECTED_TEXT)

        response = result.response
        now = self._clock()
        if response.server_errors:
            self._hold_error(response.server_errors[0], now)

        if request.fetch_aircraft_type and response.aircraft_type is not None:
            self._auto_select(response.aircraft_type, now)

        aircraft = self.orchestrator.aircraft
        if (request.fetch_weapon_stations and aircraft is not None and aircraft.tracks_weapon_stations
                and response.weapon_stations is not None):
            aircraft.update_weapon_stations(response.weapon_stations)

        self.orchestrator.update_progress(response.current_command_index, generation)

        is_f10_view = bool(response.is_f10_view)
        if self._held_error is not None and now < self._held_until:
            return DCSStatus(StatusKind.SERVER_ERROR, self._held_error, response.camera_position, is_f10_view)
        self._held_error = None

        if response.camera_position is None:
            return DCSStatus(StatusKind.NO_COORDINATES, NO_COORDINATES_TEXT, None, is_f10_view)
        return DCSStatus(StatusKind.CONNECTED, format_camera_position(response.camera_position),
                         response.camera_position, is_f10_view)

    def _hold_error(self, text: str, now: float) -> None:
        if text != self._held_error:
            logger.warning(f"DCS reported: {text}")
        self._held_error = text
        self._held_until = now + self.error_hold

    def _auto_select(self, model: str, now: float) -> None:
        try:
            kind = kind_for_model(model)
        except UnknownAircraftError as e:
            self._hold_error(str(e), now)
            if model != self._unknown_model:
                self._unknown_model = model
                self.orchestrator.select_aircraft(None, pinned=False)
            return
        self._unknown_model = None

        current = self.orchestrator.aircraft
        if (current.kind if current else None) == kind:
            return
        aircraft = create_aircraft(kind, **self.aircraft_options.get(kind, {})) if kind else None
        self.orchestrator.select_aircraft(aircraft, pinned=False)
