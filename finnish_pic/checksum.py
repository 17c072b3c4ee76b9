from __future__ import annotations
from .tables import CHECKSUM_ALPHABET

# The check character is the remainder of the nine-digit number DDMMYYNNN
# divided by 31, mapped through CHECKSUM_ALPHABET.
_MODULUS = len(CHECKSUM_ALPHABET)


def checksum_base(day: str, month: str, year: str, rolling_id: str) -> int:
    """Concatenate the fixed-width fields and read them as one decimal number.

    Every field must already be zero-padded (2+2+2+3 digits); a leading zero in
    the day simply yields a smaller integer, which is what the check
    character is computed from.
    """
    return int(day + month + year + rolling_id, 10)


def checksum(base: int) -> str:
    return CHECKSUM_ALPHABET[base % _MODULUS]


def verify(base: int, char: str) -> bool:
    """Case-sensitive: a lowercase check character never verifies."""
    return checksum(base) == char
