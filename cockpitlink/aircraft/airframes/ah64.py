# cockpitlink/aircraft/airframes/ah64.py

from typing import Dict, List

from ..constants import AH64Cockpit
from ..core import CommandSequence, DCSAircraft, NavigationState
from ..exceptions import InvalidPointOptionError
from ...constants.aircraft import AircraftKind
from ...dcs_interface.messages import DCSCommand
from ...geo.data_models import DataEntry, NavPointSpec


class AH64(DCSAircraft):
    """
    AH-64D TSD point entry through the keyboard unit.

    Pilot and CPG have their own KU and MPDs, so the crew station picks the
    device IDs. The aircraft numbers new points itself; the compiler only
    keeps count so it can stop before a pool runs out.
    """

    kind = AircraftKind.AH64

    def __init__(self, is_pilot: bool = True):
        self.const = AH64Cockpit
        self.is_pilot = is_pilot
        seat = 'PLT' if is_pilot else 'CPG'
        self.ku = self.const.KU[seat]
        self.mpd = self.const.RIGHT_MPD[seat]

    def get_point_types(self) -> List[str]:
        return list(self.const.POINT_TYPES)

    def get_point_options_for_type(self, point_type: str) -> List[str]:
        return list(self.const.IDENTS.get(point_type, {}))

    def describe_option(self, point_type: str, ident: str) -> str:
        return self.const.IDENTS[point_type][ident]

    def initial_state(self) -> NavigationState:
        return NavigationState(counters={pool: first for pool, (first, _) in self.const.POOLS.items()})

    def compile_entry(self, entry: DataEntry, spec: NavPointSpec, counters: Dict[str, int]) -> List[DCSCommand]:
        type_button, _, pool = self.const.POINT_TYPES[spec.point_type]
        _, last = self.const.POOLS[pool]
        self.take_slot(counters, pool, last, f"{spec.point_type} points")

        grid = self.mgrs_for(entry, self.const.MGRS_PRECISION)
        free_text = "".join(c for c in entry.point.label.upper() if c in self.const.KEYS)
        free_text = free_text[:self.const.MAX_FREE_TEXT]

        commands = [
            self._mpd('TSD'),
            self._mpd(self.const.POINT),
            self._mpd(self.const.ADD),
            self._mpd(type_button),
            self._mpd(self.const.IDENT),
        ]
        commands += self._ku_field(spec.option)
        commands += self._ku_field(free_text)
        commands += self._ku_field(grid.zone + grid.digraph + grid.easting + grid.northing)
        commands += self._ku_field(str(self.altitude_ft(entry)))
        return commands

    def compile_point_deletion(self, point_type: str, first: int, last: int) -> CommandSequence:
        """Commands deleting the stored points first..last (inclusive) of one type."""
        if point_type not in self.const.POINT_TYPES:
            raise InvalidPointOptionError(f"AH64 has no point type \"{point_type}\"")
        _, prefix, pool = self.const.POINT_TYPES[point_type]
        pool_first, pool_last = self.const.POOLS[pool]
        if not pool_first <= first <= last <= pool_last:
            raise InvalidPointOptionError(
                f"{point_type} points are numbered {pool_first}..{pool_last}, got {first}..{last}")

        sequence = CommandSequence()
        sequence.extend([self._mpd('TSD'), self._mpd(self.const.POINT)])
        for number in range(first, last + 1):
            sequence.extend([self._mpd(self.const.IDENT)])
            sequence.extend(self._ku_field(f"{prefix}{number:02d}"))
            sequence.extend([self._mpd(self.const.DEL), self._mpd(self.const.CONFIRM_YES)])
        return sequence

    def _mpd(self, button: str) -> DCSCommand:
        return self.press(self.mpd, self.const.MPD_BUTTONS[button], delay=self.const.PAGE_DELAY_MS)

    def _ku_field(self, text: str) -> List[DCSCommand]:
        commands = [self.press(self.ku, self.const.KU_CLR)]
        commands += self.type_text(self.ku, self.const.KEYS, text)
        commands.append(self.press(self.ku, self.const.KU_ENTER))
        return commands
