# cockpitlink/aircraft/airframes/a10c.py

from typing import Dict, List

from ..constants import A10CCockpit
from ..core import DCSAircraft, NavigationState
from ...constants.aircraft import AircraftKind
from ...dcs_interface.messages import DCSCommand
from ...geo.data_models import DataEntry, NavPointSpec
from ...geo.utils.coordinates import degrees_minutes_digits


class A10C(DCSAircraft):
    """
    A-10C CDU waypoint entry, in L/L or MGRS.

    The CDU must already be set to the same coordinate mode before the
    transfer starts; the compiler cannot read it back.
    """

    kind = AircraftKind.A10C

    def __init__(self, use_mgrs: bool = False):
        self.const = A10CCockpit
        self.use_mgrs = use_mgrs

    def get_point_types(self) -> List[str]:
        return ["Waypoint"]

    def initial_state(self) -> NavigationState:
        return NavigationState(counters={'waypoints_added': 0})

    def compile_entry(self, entry: DataEntry, spec: NavPointSpec, counters: Dict[str, int]) -> List[DCSCommand]:
        self.take_slot(counters, 'waypoints_added', self.const.MAX_WAYPOINTS - 1, "user waypoints")
        cdu = self.const.CDU
        name = self._cdu_name(entry.point.label)

        commands = [
            self._lsk('WP', delay=self.const.PAGE_DELAY_MS),
            self._lsk(self.const.WAYPOINT_PAGE, delay=self.const.PAGE_DELAY_MS),
        ]
        # A name in the scratchpad becomes the new waypoint's name
        commands += self.type_text(cdu, self.const.KEYS, name)
        commands.append(self._lsk(self.const.ADD_WP))

        if self.use_mgrs:
            grid = self.mgrs_for(entry)
            commands += self.type_text(cdu, self.const.KEYS, grid.zone)
            commands.append(self._lsk(self.const.LAT_OR_GRID_ZONE))
            commands += self.type_text(cdu, self.const.KEYS, grid.digraph + grid.easting + grid.northing)
            commands.append(self._lsk(self.const.LON_OR_GRID_SQUARE))
        else:
            positive, digits = degrees_minutes_digits(entry.point.lat, 2, minute_decimals=3)
            commands += self.type_text(cdu, self.const.KEYS, ('N' if positive else 'S') + digits)
            commands.append(self._lsk(self.const.LAT_OR_GRID_ZONE))
            positive, digits = degrees_minutes_digits(entry.point.lon, 3, minute_decimals=3)
            commands += self.type_text(cdu, self.const.KEYS, ('E' if positive else 'W') + digits)
            commands.append(self._lsk(self.const.LON_OR_GRID_SQUARE))

        # AGL points keep the terrain elevation the CDU fills in
        if not entry.point.altitude_is_agl:
            commands += self.type_text(cdu, self.const.KEYS, str(self.altitude_ft(entry)))
            commands.append(self._lsk(self.const.ELEVATION))

        commands.append(self._lsk('WP', delay=self.const.PAGE_DELAY_MS))
        return commands

    def _lsk(self, button: str, delay: int = None) -> DCSCommand:
        return self.press(self.const.CDU, self.const.BUTTONS[button], delay=delay)

    def _cdu_name(self, label: str) -> str:
        cleaned = "".join(c for c in label.upper() if c in self.const.KEYS)
        return cleaned[:self.const.MAX_NAME_LENGTH]
