# cockpitlink/aircraft/airframes/ka50.py

from typing import Dict, List

from ..constants import KA50Cockpit
from ..core import DCSAircraft, NavigationState
from ...constants.aircraft import AircraftKind
from ...dcs_interface.messages import DCSCommand
from ...geo.data_models import DataEntry, NavPointSpec
from ...geo.utils.coordinates import degrees_minutes_digits


class KA50(DCSAircraft):
    """
    Ka-50 PVI-800 entry.

    Each point type has its own numbered slots on the PVI. Coordinates are
    typed as a sign key followed by degrees and minutes to a tenth.
    """

    kind = AircraftKind.KA50

    def __init__(self):
        self.const = KA50Cockpit

    def get_point_types(self) -> List[str]:
        return list(self.const.POINT_TYPES)

    def initial_state(self) -> NavigationState:
        return NavigationState(counters={point_type: 1 for point_type in self.const.POINT_TYPES})

    def compile_entry(self, entry: DataEntry, spec: NavPointSpec, counters: Dict[str, int]) -> List[DCSCommand]:
        page_button, capacity = self.const.POINT_TYPES[spec.point_type]
        slot = self.take_slot(counters, spec.point_type, capacity, f"{spec.point_type.lower()} slot")
        pvi = self.const.PVI

        commands = [
            self.press(pvi, self.const.BUTTONS[page_button], delay=self.const.PAGE_DELAY_MS),
            # Slot 10 is the 0 key
            self.press(pvi, self.const.KEYS[str(slot % 10)]),
        ]
        commands += self._signed_digits(entry.point.lat, 2)
        commands += self._signed_digits(entry.point.lon, 3)
        commands.append(self.press(pvi, self.const.BUTTONS['ENTER']))
        return commands

    def _signed_digits(self, value: float, degree_width: int) -> List[DCSCommand]:
        positive, digits = degrees_minutes_digits(value, degree_width, minute_decimals=1)
        sign = self.const.SIGN_POSITIVE if positive else self.const.SIGN_NEGATIVE
        return self.type_text(self.const.PVI, self.const.KEYS, sign + digits)
