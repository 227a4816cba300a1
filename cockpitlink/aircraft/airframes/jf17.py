# cockpitlink/aircraft/airframes/jf17.py

from typing import Dict, List

from ..constants import JF17Cockpit
from ..core import DCSAircraft, NavigationState
from ...constants.aircraft import AircraftKind
from ...dcs_interface.messages import DCSCommand
from ...geo.data_models import DataEntry, NavPointSpec
from ...geo.utils.coordinates import degrees_minutes_seconds_digits


class JF17(DCSAircraft):
    """JF-17 UFCP entry with sequential waypoint numbers and separate PP slots."""

    kind = AircraftKind.JF17

    def __init__(self, starting_waypoint: int = JF17Cockpit.DEFAULT_STARTING_WAYPOINT):
        self.const = JF17Cockpit
        if not self.const.FIRST_WAYPOINT <= starting_waypoint <= self.const.LAST_WAYPOINT:
            raise ValueError(f"Starting waypoint must be within "
                             f"{self.const.FIRST_WAYPOINT}..{self.const.LAST_WAYPOINT}")
        self.starting_waypoint = starting_waypoint

    def get_point_types(self) -> List[str]:
        return ["Waypoint", "PP"]

    def initial_state(self) -> NavigationState:
        return NavigationState(counters={'Waypoint': self.starting_waypoint, 'PP': 1})

    def compile_entry(self, entry: DataEntry, spec: NavPointSpec, counters: Dict[str, int]) -> List[DCSCommand]:
        if spec.point_type == "PP":
            number = self.const.PP_BASE_NUMBER + self.take_slot(counters, 'PP', self.const.MAX_PP, "PP slots")
        else:
            number = self.take_slot(counters, 'Waypoint', self.const.LAST_WAYPOINT, "waypoints")

        ufcp = self.const.UFCP
        commands = [self.press(ufcp, self.const.DST)]
        commands += self._entry(str(number))
        commands.append(self.press(ufcp, self.const.LINE_SELECT['LAT']))
        commands += self._entry(self._hemisphere_digits(entry.point.lat, 2, 'N', 'S'))
        commands.append(self.press(ufcp, self.const.LINE_SELECT['LON']))
        commands += self._entry(self._hemisphere_digits(entry.point.lon, 3, 'E', 'W'))
        commands.append(self.press(ufcp, self.const.LINE_SELECT['ALT']))
        commands += self._entry(str(self.altitude_ft(entry)))
        commands.append(self.press(ufcp, self.const.DST))
        return commands

    def _hemisphere_digits(self, value: float, degree_width: int, positive: str, negative: str) -> str:
        is_positive, digits = degrees_minutes_seconds_digits(value, degree_width)
        return self.const.HEMISPHERE_KEYS[positive if is_positive else negative] + digits

    def _entry(self, keys: str) -> List[DCSCommand]:
        commands = self.type_text(self.const.UFCP, self.const.KEYS, keys)
        commands.append(self.press(self.const.UFCP, self.const.ENT))
        return commands
