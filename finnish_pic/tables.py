from __future__ import annotations
from types import MappingProxyType

# Century sign → base year. 1800s use "+", 1900s "-" and the 2023 additions
# Y/X/W/V/U, 2000s "A" plus the 2023 additions B–F.
CENTURY_BY_SIGN = MappingProxyType(
    {
        "+": 1800,
        "-": 1900,
        "Y": 1900,
        "X": 1900,
        "W": 1900,
        "V": 1900,
        "U": 1900,
        "A": 2000,
        "B": 2000,
        "C": 2000,
        "D": 2000,
        "E": 2000,
        "F": 2000,
    }
)

# Base year → signs a generator may pick from.
SIGNS_BY_CENTURY = MappingProxyType(
    {
        1800: "+",
        1900: "YXWVU-",
        2000: "ABCDEF",
    }
)

FEBRUARY = "02"

DAYS_IN_MONTH = MappingProxyType(
    {
        "01": 31,
        "02": 28,
        "03": 31,
        "04": 30,
        "05": 31,
        "06": 30,
        "07": 31,
        "08": 31,
        "09": 30,
        "10": 31,
        "11": 30,
        "12": 31,
    }
)

# G, I, O and Q are left out.
CHECKSUM_ALPHABET = "0123456789ABCDEFHJKLMNPRSTUVWXY"

MIN_AGE = 1
MAX_AGE = 200

# Rolling ids below 100 are reserved for special cases; starting at 100 also
# avoids zero padding.
MIN_GENERATED_ROLLING_ID = 100
MAX_GENERATED_ROLLING_ID = 899

# Birth years the century signs and the two-digit year windows can express.
FIRST_ENCODABLE_YEAR = 1850
LAST_ENCODABLE_YEAR = 2029
