# cockpitlink/aircraft/core.py

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from .exceptions import (
    CapacityExceededError,
    CompilationError,
    InvalidPointOptionError,
    MissingPointDataError,
)
from ..constants.aircraft import AircraftKind
from ..dcs_interface.core import ConnectionResult
from ..dcs_interface.messages import DCSCommand, DCSMessage
from ..geo.data_models import DataEntry, NavPointSpec
from ..geo.utils.coordinates import to_mgrs, MGRSReference

logger = logging.getLogger(__name__)


@dataclass
class CommandSequence:
    """Ordered cockpit commands for one or more entries."""
    commands: List[DCSCommand] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.commands)

    def extend(self, commands: Sequence[DCSCommand]) -> None:
        self.commands.extend(commands)

    def __len__(self):
        return len(self.commands)

    def __iter__(self) -> Iterator[DCSCommand]:
        return iter(self.commands)


@dataclass
class NavigationState:
    """
    Running counters of one aircraft (next free slot, points used so far...).

    Owned by whoever drives transfers, never by the compiler, and replaced
    with a fresh one whenever the selected aircraft changes.
    """
    counters: Dict[str, int] = field(default_factory=dict)


@dataclass
class CompileReport:
    sequence: CommandSequence
    errors: List[CompilationError] = field(default_factory=list)
    compiled_ids: List[int] = field(default_factory=list)
    # Set by send_to_dcs; None when nothing compiled and nothing was sent
    outcome: Optional[ConnectionResult] = None

    @property
    def count(self) -> int:
        return self.sequence.count


class DCSAircraft:
    """
    Base class for the per-aircraft cockpit command compilers.

    Subclasses set `kind`, list their point types and implement compile_entry.
    Every entry compiles in the same order: page/mode selection, coordinate
    digits, sub-option selection, commit.
    """

    kind: AircraftKind = None
    tracks_weapon_stations = False
    default_delay_ms = 0

    def get_point_types(self) -> List[str]:
        raise NotImplementedError

    def get_point_options_for_type(self, point_type: str) -> List[str]:
        return []

    def initial_state(self) -> NavigationState:
        return NavigationState()

    def compile_entry(self, entry: DataEntry, spec: NavPointSpec, counters: Dict[str, int]) -> List[DCSCommand]:
        """
        Compiles one entry. May update `counters`, which is a private copy the
        caller commits only if this returns without raising CompilationError.
        """
        raise NotImplementedError

    def compile_entries(self, entries: Sequence[DataEntry], state: NavigationState) -> CompileReport:
        report = CompileReport(sequence=CommandSequence())
        for entry in entries:
            if not entry.xfer:
                continue
            counters = dict(state.counters)
            try:
                spec = self.resolve_spec(entry)
                commands = self.compile_entry(entry, spec, counters)
            except CompilationError as e:
                e.entry_id = entry.id
                logger.warning(f"{self.kind.value}: entry {entry.id} skipped: {e}")
                report.errors.append(e)
                continue
            state.counters = counters
            report.sequence.extend(commands)
            report.compiled_ids.append(entry.id)
        return report

    def send_to_dcs(self, entries: Sequence[DataEntry], connection, state: NavigationState) -> CompileReport:
        """
        Compiles every entry flagged for transfer and sends them as one request.

        The report's count is the number of commands sent, the bound for
        playback progress; its outcome tells whether the host received them.
        """
        report = self.compile_entries(entries, state)
        if report.count:
            report.outcome = connection.send_request(DCSMessage(commands=list(report.sequence)))
        return report

    def resolve_spec(self, entry: DataEntry) -> NavPointSpec:
        point_types = self.get_point_types()
        spec = entry.spec_for(self.kind)
        if spec is None:
            if len(point_types) != 1:
                raise MissingPointDataError(f"Entry {entry.id} has no point type for {self.kind.value}")
            spec = NavPointSpec(self.kind, point_types[0])

        if spec.point_type not in point_types:
            raise InvalidPointOptionError(f"{self.kind.value} has no point type \"{spec.point_type}\"")

        options = self.get_point_options_for_type(spec.point_type)
        if spec.option is None:
            if len(options) > 1:
                raise InvalidPointOptionError(f"\"{spec.point_type}\" on {self.kind.value} needs an option")
            return NavPointSpec(self.kind, spec.point_type, options[0] if options else None)
        if spec.option not in options:
            raise InvalidPointOptionError(f"\"{spec.option}\" is not an option for \"{spec.point_type}\"")
        return spec

    # --- Command building helpers ---

    def press(self, device: int, code: int, delay: Optional[int] = None,
              activate: int = 1, add_depress: bool = True) -> DCSCommand:
        return DCSCommand(device, code, self.default_delay_ms if delay is None else delay, activate, add_depress)

    def type_text(self, device: int, keys: Dict[str, int], text: str) -> List[DCSCommand]:
        commands = []
        for char in text:
            if char not in keys:
                raise InvalidPointOptionError(f"Cannot type {char!r} on the {self.kind.value} keypad")
            commands.append(self.press(device, keys[char]))
        return commands

    def take_slot(self, counters: Dict[str, int], counter: str, last: int, what: str) -> int:
        """Returns the counter's current value and advances it, or fails if past `last`."""
        slot = counters[counter]
        if slot > last:
            raise CapacityExceededError(f"{self.kind.value}: no {what} left (maximum {last})")
        counters[counter] = slot + 1
        return slot

    def altitude_ft(self, entry: DataEntry) -> int:
        """MSL altitude in whole feet for the keypad, never below zero."""
        try:
            return max(0, entry.altitude_msl_ft())
        except ValueError as e:
            raise MissingPointDataError(str(e)) from e

    @staticmethod
    def mgrs_for(entry: DataEntry, precision: int = 5) -> MGRSReference:
        try:
            return to_mgrs(entry.point.lat, entry.point.lon, precision)
        except ValueError as e:
            raise CompilationError(str(e)) from e
