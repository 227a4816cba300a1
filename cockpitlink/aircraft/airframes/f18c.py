# cockpitlink/aircraft/airframes/f18c.py

import logging
import re
from typing import Dict, List, Optional, Sequence

from ..constants import F18CCockpit
from ..core import DCSAircraft, NavigationState
from ..exceptions import InvalidPointOptionError
from ...constants.aircraft import AircraftKind
from ...dcs_interface.messages import DCSCommand, WeaponStation
from ...geo.data_models import DataEntry, NavPointSpec
from ...geo.utils.coordinates import degrees_minutes_digits

logger = logging.getLogger(__name__)

WAYPOINT_STR = "Waypoint"
SLAMER_STP_STR = "SLAM-ER STP"
PP_SUFFIX = " PP"
ALL_STATIONS = "ALL"

_PP_OPTION = re.compile(r"^PP (\d) - (ALL|STA(\d+))$")


class F18C(DCSAircraft):
    """
    F/A-18C waypoints, GPS weapon PP targets and SLAM-ER steerpoints.

    Expects PRECISE mode in HSI > DATA and L/L decimal. Waypoints are written
    from the one after the currently selected waypoint upwards. Weapon entry
    needs to know which stations carry what, so the poller feeds in the
    stations DCS reports.
    """

    kind = AircraftKind.F18C
    tracks_weapon_stations = True

    def __init__(self):
        self.const = F18CCockpit
        self.weapon_stations: Dict[int, str] = {}

    # --- Point types ---

    def get_point_types(self) -> List[str]:
        return ([WAYPOINT_STR]
                + [weapon + PP_SUFFIX for weapon in self.const.WEAPON_PREFIXES]
                + [SLAMER_STP_STR])

    def get_point_options_for_type(self, point_type: str) -> List[str]:
        weapon = self._pp_weapon(point_type)
        if weapon is None:
            return []
        stations = [ALL_STATIONS] + [f"STA{s}" for s in self.stations_with(weapon)]
        return [f"PP {n} - {station}" for n in range(1, self.const.MAX_PP + 1) for station in stations]

    def _pp_weapon(self, point_type: str) -> Optional[str]:
        if point_type.endswith(PP_SUFFIX):
            weapon = point_type[:-len(PP_SUFFIX)]
            if weapon in self.const.WEAPON_PREFIXES:
                return weapon
        return None

    # --- Weapon stations ---

    def update_weapon_stations(self, stations: Sequence[WeaponStation]) -> None:
        known = {}
        for station in stations:
            weapon = self.weapon_for_type_name(station.weapon_type)
            if weapon is not None and station.station in self.const.DDI_STATION:
                known[station.station] = weapon
        if known != self.weapon_stations:
            logger.info(f"F18C weapon stations: {known}")
        self.weapon_stations = known

    def weapon_for_type_name(self, type_name: str) -> Optional[str]:
        for weapon, prefixes in self.const.WEAPON_PREFIXES.items():
            if type_name.startswith(prefixes):
                return weapon
        return None

    def stations_with(self, weapon: str) -> List[int]:
        return sorted(s for s, w in self.weapon_stations.items() if w == weapon)

    # --- Compilation ---

    def initial_state(self) -> NavigationState:
        return NavigationState(counters={'waypoint': 1, 'slamer_stp': 1})

    def compile_entry(self, entry: DataEntry, spec: NavPointSpec, counters: Dict[str, int]) -> List[DCSCommand]:
        if spec.point_type == WAYPOINT_STR:
            return self._compile_waypoint(entry, counters)
        if spec.point_type == SLAMER_STP_STR:
            return self._compile_slamer_steerpoint(entry, counters)
        return self._compile_preplanned(entry, self._pp_weapon(spec.point_type), spec.option)

    def _compile_waypoint(self, entry: DataEntry, counters: Dict[str, int]) -> List[DCSCommand]:
        self.take_slot(counters, 'waypoint', self.const.MAX_WAYPOINTS, "waypoints")
        commands = [
            self._ampcd(self.const.AMPCD_TAC_MENU),
            self._ampcd(self.const.AMPCD_HSI),
            self._ampcd(self.const.AMPCD_DATA),
            self._ampcd(self.const.AMPCD_WPT_UP),
        ]
        commands += self._position(entry)
        commands += self._elevation(entry)
        commands.append(self._ampcd(self.const.AMPCD_DATA))
        return commands

    def _compile_preplanned(self, entry: DataEntry, weapon: str, option: str) -> List[DCSCommand]:
        match = _PP_OPTION.match(option or "")
        if not match:
            raise InvalidPointOptionError(f"Bad PP option \"{option}\"")
        pp_index = int(match.group(1))
        stations = self.stations_with(weapon) if match.group(2) == ALL_STATIONS else [int(match.group(3))]
        if not stations or any(self.weapon_stations.get(s) != weapon for s in stations):
            raise InvalidPointOptionError(f"No station carries {weapon} for \"{option}\"")

        commands = []
        for station in stations:
            commands += self._select_station(station)
            commands += [self._ddi(self.const.DDI_PP[pp_index]), self._ddi(self.const.DDI_TGT_UFC)]
            commands += self._position(entry)
            commands += self._elevation(entry)
            commands.append(self._ddi(self.const.DDI_MSN))
        return commands

    def _compile_slamer_steerpoint(self, entry: DataEntry, counters: Dict[str, int]) -> List[DCSCommand]:
        stations = self.stations_with('SLAMER')
        if not stations:
            raise InvalidPointOptionError("No SLAM-ER loaded")
        steerpoint = self.take_slot(counters, 'slamer_stp', self.const.MAX_SLAMER_STEERPOINTS,
                                    "SLAM-ER steerpoints")

        commands = self._select_station(stations[0])
        commands.append(self._ddi(self.const.DDI_STP))
        commands += self._ufc_number(str(steerpoint))
        commands += self._position(entry)
        commands.append(self._ddi(self.const.DDI_MSN))
        return commands

    # --- Building blocks ---

    def _select_station(self, station: int) -> List[DCSCommand]:
        return [
            self._ddi(self.const.DDI_TAC_MENU),
            self._ddi(self.const.DDI_STORES),
            self._ddi(self.const.DDI_STATION[station]),
            self._ddi(self.const.DDI_MSN),
        ]

    def _position(self, entry: DataEntry) -> List[DCSCommand]:
        commands = [self._osb(self.const.OSB_POSN), self._osb(self.const.OSB_LAT)]
        commands += self._precise_angle(entry.point.lat, 2, 'N', 'S')
        commands.append(self._osb(self.const.OSB_LON))
        commands += self._precise_angle(entry.point.lon, 3, 'E', 'W')
        return commands

    def _precise_angle(self, value: float, degree_width: int, positive: str, negative: str) -> List[DCSCommand]:
        # Degrees and whole minutes first, the decimal minutes in a second entry
        is_positive, digits = degrees_minutes_digits(value, degree_width, minute_decimals=4)
        hemisphere = self.const.HEMISPHERE_KEYS[positive if is_positive else negative]
        return self._ufc_number(hemisphere + digits[:-4]) + self._ufc_number(digits[-4:])

    def _elevation(self, entry: DataEntry) -> List[DCSCommand]:
        commands = [self._osb(self.const.OSB_ELEV), self._osb(self.const.OSB_FEET)]
        commands += self._ufc_number(str(self.altitude_ft(entry)))
        return commands

    def _ufc_number(self, keys: str) -> List[DCSCommand]:
        commands = self.type_text(self.const.UFC, self.const.KEYS, keys)
        commands.append(self.press(self.const.UFC, self.const.UFC_ENT))
        return commands

    def _osb(self, number: int) -> DCSCommand:
        return self.press(self.const.UFC, self.const.UFC_OSB[number])

    def _ampcd(self, pb: int) -> DCSCommand:
        return self.press(self.const.AMPCD, self.const.PB[pb], delay=self.const.PAGE_DELAY_MS)

    def _ddi(self, pb: int) -> DCSCommand:
        return self.press(self.const.LEFT_DDI, self.const.PB[pb], delay=self.const.PAGE_DELAY_MS)
