# cockpitlink/aircraft/airframes/f16c.py

from typing import Dict, List

from ..constants import F16CCockpit
from ..core import DCSAircraft, NavigationState
from ...constants.aircraft import AircraftKind
from ...dcs_interface.messages import DCSCommand
from ...geo.data_models import DataEntry, NavPointSpec
from ...geo.utils.coordinates import degrees_minutes_digits


class F16C(DCSAircraft):
    """F-16C steerpoints through the ICP and DED STPT page."""

    kind = AircraftKind.F16C

    def __init__(self, starting_steerpoint: int = F16CCockpit.DEFAULT_STARTING_STEERPOINT):
        self.const = F16CCockpit
        if not self.const.FIRST_STEERPOINT <= starting_steerpoint <= self.const.LAST_STEERPOINT:
            raise ValueError(f"Starting steerpoint must be within "
                             f"{self.const.FIRST_STEERPOINT}..{self.const.LAST_STEERPOINT}")
        self.starting_steerpoint = starting_steerpoint

    def get_point_types(self) -> List[str]:
        return ["Waypoint"]

    def initial_state(self) -> NavigationState:
        return NavigationState(counters={'steerpoint': self.starting_steerpoint})

    def compile_entry(self, entry: DataEntry, spec: NavPointSpec, counters: Dict[str, int]) -> List[DCSCommand]:
        steerpoint = self.take_slot(counters, 'steerpoint', self.const.LAST_STEERPOINT, "steerpoints")

        commands = [self._key(self.const.STPT_KEY)]
        commands += self._entry(str(steerpoint))
        commands.append(self._dcs_down())
        commands += self._entry(self._hemisphere_digits(entry.point.lat, 2, 'N', 'S'))
        commands.append(self._dcs_down())
        commands += self._entry(self._hemisphere_digits(entry.point.lon, 3, 'E', 'W'))
        commands.append(self._dcs_down())
        commands += self._entry(str(self.altitude_ft(entry)))
        # RTN back to CNI
        commands.append(self.press(self.const.UFC, self.const.DCS_RTN_SEQ, activate=-1))
        return commands

    def _hemisphere_digits(self, value: float, degree_width: int, positive: str, negative: str) -> str:
        is_positive, digits = degrees_minutes_digits(value, degree_width, minute_decimals=3)
        return self.const.HEMISPHERE_KEYS[positive if is_positive else negative] + digits

    def _key(self, key: str) -> DCSCommand:
        return self.press(self.const.UFC, self.const.KEYS[key])

    def _entry(self, keys: str) -> List[DCSCommand]:
        commands = self.type_text(self.const.UFC, self.const.KEYS, keys)
        commands.append(self.press(self.const.UFC, self.const.ENTR))
        return commands

    def _dcs_down(self) -> DCSCommand:
        return self.press(self.const.UFC, self.const.DCS_UP_DN, activate=-1)
