# cockpitlink/transfer/core.py

import logging
import threading
from typing import Optional, Sequence

from .data_models import TransferProgress, TransferResult, TransferSession
from ..aircraft.core import CommandSequence, DCSAircraft, NavigationState
from ..aircraft.exceptions import AircraftNotSelectedError
from ..dcs_interface.core import Connected, ConnectionResult, DCSConnection
from ..dcs_interface.messages import DCSMessage
from ..geo.data_models import DataEntry

logger = logging.getLogger(__name__)


class TransferOrchestrator:
    """
    Owns the selected aircraft, its navigation state and the running transfer.

    The host paces playback itself; this class only has the aircraft submit
    the compiled sequence and folds the command index reported by each poll
    into the progress of the current session.
    """

    def __init__(self, connection: DCSConnection):
        self.connection = connection
        self.aircraft: Optional[DCSAircraft] = None
        self.aircraft_pinned = False
        self.state: Optional[NavigationState] = None
        self.session: Optional[TransferSession] = None
        # Bumped each time a sequence reaches the host
        self._generation = 0
        # Guards the session against a poll tick reading it mid-update
        self._lock = threading.Lock()

    def select_aircraft(self, aircraft: Optional[DCSAircraft], pinned: bool = True) -> None:
        """Switches aircraft. Counters start over and any running session is forgotten."""
        with self._lock:
            self.aircraft = aircraft
            self.aircraft_pinned = pinned and aircraft is not None
            self.state = aircraft.initial_state() if aircraft else None
            self.session = None
        logger.info(f"Aircraft selected: {aircraft.kind.value if aircraft else 'none'}"
                    f"{' (pinned)' if self.aircraft_pinned else ''}")

    def start_transfer(self, entries: Sequence[DataEntry]) -> TransferResult:
        aircraft, state = self.aircraft, self.state
        if aircraft is None:
            raise AircraftNotSelectedError("Need to select aircraft type.")

        report = aircraft.send_to_dcs(entries, self.connection, state)
        result = TransferResult(total=report.count, delivered=isinstance(report.outcome, Connected),
                                compiled_ids=report.compiled_ids, errors=report.errors)
        if report.outcome is None:
            logger.info("Nothing to transfer")
            return result

        self._track(report.count, report.outcome)
        if result.delivered:
            logger.info(f"Transfer started: {report.count} commands for {len(report.compiled_ids)} entries")
        return result

    def play(self, sequence: CommandSequence) -> ConnectionResult:
        """Submits an already compiled sequence in one request and tracks its playback."""
        outcome = self.connection.send_request(DCSMessage(commands=list(sequence)))
        self._track(sequence.count, outcome)
        return outcome

    def _track(self, total: int, outcome: ConnectionResult) -> None:
        if not isinstance(outcome, Connected):
            logger.info(f"Transfer not delivered: {outcome.reason}")
            return
        with self._lock:
            self._generation += 1
            self.session = TransferSession(total=total, generation=self._generation)

    def poll_generation(self) -> int:
        """Taken by a poll before it sends; replies to older polls cannot describe the current session."""
        with self._lock:
            return self._generation

    def stop_transfer(self) -> ConnectionResult:
        """Asks the host to drop the remaining commands. Not retried; the next poll shows the effect."""
        with self._lock:
            if self.session is not None:
                self.session.running = False
        logger.info("Transfer stop requested")
        return self.connection.send_request(DCSMessage(stop=True))

    def update_progress(self, index: Optional[int], generation: Optional[int] = None) -> TransferProgress:
        """
        Applies the host's currentCommandIndex to the running session.

        The index never moves backwards within a session and is clamped to the
        sequence length. The session ends once the host reports no index,
        reaches the end, or playback was stopped. A reply to a poll sent
        before the session was delivered (an older `generation`) is ignored.
        """
        with self._lock:
            session = self.session
            if session is None:
                return TransferProgress(active=False)
            if generation is not None and generation < session.generation:
                return TransferProgress(active=True, current=session.last_index, total=session.total)
            if index is None or not session.running:
                logger.info(f"Transfer finished at {session.last_index}/{session.total}")
                self.session = None
                return TransferProgress(active=False, current=session.last_index, total=session.total)

            session.last_index = max(session.last_index, min(index, session.total))
            if session.last_index >= session.total:
                logger.info(f"Transfer complete: {session.total} commands")
                self.session = None
                return TransferProgress(active=False, current=session.total, total=session.total)
            return TransferProgress(active=True, current=session.last_index, total=session.total)

    def progress(self) -> TransferProgress:
        with self._lock:
            if self.session is None:
                return TransferProgress(active=False)
            return TransferProgress(active=True, current=self.session.last_index, total=self.session.total)
