# cockpitlink/aircraft/constants.py
"""
Cockpit device and button IDs per aircraft.

Numbers come from each module's clickable data (export the controls as HTML
in DCS and read the mangled names in the last column).
"""


def _digit_codes(zero: int, one: int) -> dict:
    """Keypads where 1..9 are consecutive and 0 sits elsewhere."""
    codes = {str(d): one + d - 1 for d in range(1, 10)}
    codes['0'] = zero
    return codes


def _letter_codes(first: int) -> dict:
    return {chr(ord('A') + i): first + i for i in range(26)}


class KA50Cockpit:
    """PVI-800 navigation control panel"""
    PVI = 20
    KEYS = {str(d): 3001 + d for d in range(10)}
    BUTTONS = {
        'WAYPOINTS': 3011,
        'AIRFIELDS': 3013,
        'TARGETS': 3014,
        'FIXPOINTS': 3016,
        'ENTER': 3018,
    }
    # Sign keys: the PVI takes 0 for positive and 1 for negative
    SIGN_POSITIVE = '0'
    SIGN_NEGATIVE = '1'
    POINT_TYPES = {  # label: (page button, capacity)
        'Waypoint': ('WAYPOINTS', 6),
        'Fixpoint': ('FIXPOINTS', 4),
        'Airfield': ('AIRFIELDS', 8),
        'Target': ('TARGETS', 10),
    }
    PAGE_DELAY_MS = 100


class A10CCockpit:
    """Control Display Unit"""
    CDU = 9
    KEYS = {**_digit_codes(zero=3024, one=3015), **_letter_codes(3027)}
    BUTTONS = {
        'LSK_3L': 3001, 'LSK_5L': 3002, 'LSK_7L': 3003, 'LSK_9L': 3004,
        'LSK_3R': 3005, 'LSK_5R': 3006, 'LSK_7R': 3007, 'LSK_9R': 3008,
        'WP': 3011,
    }
    WAYPOINT_PAGE = 'LSK_3L'
    ADD_WP = 'LSK_7R'
    ELEVATION = 'LSK_5L'
    LAT_OR_GRID_ZONE = 'LSK_7L'
    LON_OR_GRID_SQUARE = 'LSK_9L'
    MAX_WAYPOINTS = 2050
    MAX_NAME_LENGTH = 12
    PAGE_DELAY_MS = 100


class AH64Cockpit:
    """Keyboard Unit and right MPD, per crew station"""
    KU = {'PLT': 29, 'CPG': 30}
    RIGHT_MPD = {'PLT': 43, 'CPG': 45}
    KEYS = {**_digit_codes(zero=3043, one=3033), **_letter_codes(3007), ' ': 3003}
    KU_ENTER = 3006
    KU_CLR = 3001
    MPD_BUTTONS = {
        **{f'T{i}': 3000 + i for i in range(1, 7)},
        **{f'R{i}': 3006 + i for i in range(1, 7)},
        **{f'B{i}': 3012 + i for i in range(1, 7)},
        **{f'L{i}': 3018 + i for i in range(1, 7)},
        'TSD': 3029,
    }
    POINT = 'B6'
    ADD = 'L2'
    DEL = 'L4'
    CONFIRM_YES = 'L1'
    IDENT = 'L1'
    POINT_TYPES = {  # label: (type button on ADD page, designator prefix, slot pool)
        'Waypoint': ('L3', 'W', 'WPHZ'),
        'Hazard': ('L4', 'H', 'WPHZ'),
        'ControlMeasure': ('L5', 'C', 'CM'),
        'Target': ('L6', 'T', 'TG'),
    }
    POOLS = {  # pool: (first designator number, last designator number)
        'WPHZ': (1, 50),
        'CM': (51, 99),
        'TG': (1, 50),
    }
    IDENTS = {
        'Waypoint': {
            'WP': 'Waypoint',
            'AP': 'Air Control Point',
            'CC': 'Communication Check Point',
            'LZ': 'Landing Zone',
            'PP': 'Passage Point',
            'RP': 'Release Point',
            'SP': 'Start Point',
        },
        'Hazard': {
            'TU': 'Tower over 1000 ft',
            'TO': 'Tower under 1000 ft',
            'WL': 'Wires, power',
            'WS': 'Wires, telephone',
        },
        'ControlMeasure': {
            'FL': 'Friendly Unit',
            'EU': 'Enemy Unit',
            'AA': 'Assembly Area',
            'BP': 'Battle Position',
            'FA': 'Forward Arming and Refueling Point',
            'AD': 'Air Defense Artillery',
        },
        'Target': {
            'TG': 'Target Point',
            'ZU': 'ZSU-23-4 Shilka',
            'S6': '2S6 Tunguska',
            'SA': 'Generic SAM',
        },
    }
    MAX_FREE_TEXT = 3
    MGRS_PRECISION = 4
    PAGE_DELAY_MS = 200


class F16CCockpit:
    """Integrated Control Panel and Data Control Switch"""
    UFC = 17
    KEYS = _digit_codes(zero=3002, one=3003)
    ENTR = 3016
    DCS_UP_DN = 3032      # up = 1, down = -1
    DCS_RTN_SEQ = 3033    # rtn = -1, seq = 1
    STPT_KEY = '4'
    HEMISPHERE_KEYS = {'N': '2', 'S': '8', 'E': '6', 'W': '4'}
    FIRST_STEERPOINT = 1
    LAST_STEERPOINT = 699
    DEFAULT_STARTING_STEERPOINT = 200


class F18CCockpit:
    """Up Front Controller, AMPCD and left DDI"""
    UFC = 25
    AMPCD = 37
    LEFT_DDI = 35
    KEYS = _digit_codes(zero=3018, one=3019)
    UFC_ENT = 3029
    UFC_OSB = {i: 3009 + i for i in range(1, 6)}
    PB = {i: 3010 + i for i in range(1, 21)}
    HEMISPHERE_KEYS = {'N': '2', 'S': '8', 'E': '6', 'W': '4'}

    # AMPCD HSI data page
    AMPCD_TAC_MENU = 18
    AMPCD_HSI = 2
    AMPCD_DATA = 10
    AMPCD_WPT_UP = 12

    # UFC options while editing a position
    OSB_POSN = 1
    OSB_LAT = 1
    OSB_LON = 3
    OSB_ELEV = 4
    OSB_FEET = 3

    # Left DDI stores/mission pages
    DDI_TAC_MENU = 18
    DDI_STORES = 5
    DDI_MSN = 4
    DDI_TGT_UFC = 14
    DDI_STP = 7
    DDI_PP = {i: 5 + i for i in range(1, 6)}
    DDI_STATION = {2: 13, 3: 14, 7: 12, 8: 11}

    WEAPON_PREFIXES = {
        'JDAM': ('GBU-31', 'GBU-32', 'GBU-38', 'GBU-54'),
        'JSOW': ('AGM-154',),
        'SLAMER': ('AGM-84H',),
    }
    MAX_WAYPOINTS = 59
    MAX_PP = 5
    MAX_SLAMER_STEERPOINTS = 5
    PAGE_DELAY_MS = 200


class JF17Cockpit:
    """Up Front Control Panel"""
    UFCP = 46
    KEYS = _digit_codes(zero=3202, one=3203)
    ENT = 3214
    DST = 3218
    LINE_SELECT = {'LAT': 3221, 'LON': 3222, 'ALT': 3223}
    HEMISPHERE_KEYS = {'N': '2', 'S': '8', 'E': '6', 'W': '4'}
    FIRST_WAYPOINT = 1
    LAST_WAYPOINT = 29
    DEFAULT_STARTING_WAYPOINT = 10
    PP_BASE_NUMBER = 40
    MAX_PP = 6
