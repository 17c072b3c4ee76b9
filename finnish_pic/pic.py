from __future__ import annotations
import logging
import random
import re
from datetime import date
from .checksum import checksum, checksum_base
from .dates import age_in_years, birthday_passed, days_in_month, is_valid_day
from .exceptions import InvalidAge, InvalidDate, InvalidFormat
from .models import FEMALE, MALE, ParsedPic
from .tables import (
    CENTURY_BY_SIGN,
    FIRST_ENCODABLE_YEAR,
    LAST_ENCODABLE_YEAR,
    MAX_AGE,
    MAX_GENERATED_ROLLING_ID,
    MIN_AGE,
    MIN_GENERATED_ROLLING_ID,
    SIGNS_BY_CENTURY,
)

logger = logging.getLogger(__name__)

# DDMMYY C NNN Q
# The century sign limits the two-digit year to the window in which codes were
# actually issued: "+" covers 1850–1899, the 2000s signs stop at 2029.
_DAY = r"(?P<day>0[1-9]|[12][0-9]|3[01])"
_MONTH = r"(?P<month>0[1-9]|1[0-2])"
_YEAR_AND_SIGN = (
    r"(?:(?P<y18>[5-9][0-9])(?P<s18>\+)"
    r"|(?P<y19>[0-9]{2})(?P<s19>[-YXWVU])"
    r"|(?P<y20>[0-2][0-9])(?P<s20>[A-F]))"
)
_ROLLING_ID = r"(?P<rolling_id>[0-9]{3})"
_CHECKSUM = r"(?P<checksum>[0-9A-FHJ-NPR-Y])"

PIC_PATTERN = re.compile(_DAY + _MONTH + _YEAR_AND_SIGN + _ROLLING_ID + _CHECKSUM)

# Shared default source; callers that need repeatable output pass their own.
_random = random.Random()


def _match(pic: object) -> re.Match[str] | None:
    if not isinstance(pic, str):
        return None
    return PIC_PATTERN.fullmatch(pic)


def matches(pic: object) -> bool:
    """Return True if ``pic`` has the structure of a PIC (no date or checksum check)."""
    return _match(pic) is not None


def _year_and_sign(match: re.Match[str]) -> tuple[str, str]:
    for century in ("18", "19", "20"):
        sign = match.group("s" + century)
        if sign is not None:
            return match.group("y" + century), sign
    raise InvalidFormat(f"Missing century sign: {match.group()!r}")  # unreachable for PIC_PATTERN


def parse(pic: str, today: date | None = None) -> ParsedPic:
    """Parse a PIC into its birth date, sex, age and checksum validity.

    A checksum mismatch does not raise; it is reported as ``valid=False``.

    :param pic: the 11-character code, e.g. ``"010190-123A"``
    :param today: reference date for the age, defaults to ``date.today()``
    :raises InvalidFormat: ``pic`` is not shaped like a PIC
    :raises InvalidDate: the encoded birth date does not exist
    """
    match = _match(pic)
    if match is None:
        logger.debug("Rejected PIC with invalid format: %r", pic)
        raise InvalidFormat(f"Not valid PIC format: {pic!r}")

    day = match.group("day")
    month = match.group("month")
    short_year, sign = _year_and_sign(match)
    rolling_id = match.group("rolling_id")

    year = CENTURY_BY_SIGN[sign] + int(short_year)
    if not is_valid_day(year, month, int(day)):
        logger.debug("Rejected PIC with nonexistent date: %r", pic)
        raise InvalidDate(f"Not valid PIC, no such date {day}.{month}.{year}: {pic!r}")

    base = checksum_base(day, month, short_year, rolling_id)
    date_of_birth = date(year, int(month), int(day))

    return ParsedPic(
        valid=checksum(base) == match.group("checksum"),
        sex=MALE if int(rolling_id) % 2 else FEMALE,
        date_of_birth=date_of_birth,
        age_in_years=age_in_years(date_of_birth, today or date.today()),
    )


def validate(pic: str) -> bool:
    """Return True if ``pic`` is well formed, names a real date and its checksum holds."""
    try:
        return parse(pic).valid
    except (InvalidFormat, InvalidDate):
        return False


def _encodable(year: int) -> bool:
    return FIRST_ENCODABLE_YEAR <= year <= LAST_ENCODABLE_YEAR


def generate_with_age(
    age: int,
    today: date | None = None,
    rng: random.Random | None = None,
) -> str:
    """Generate a random valid PIC for a person who is ``age`` years old today.

    Sex and birth date are random. Only birth dates inside 1850–2029 are
    drawn; an age with no such birth date raises as well.

    :raises InvalidAge: ``age`` is outside 1–200 or not representable
    """
    if age < MIN_AGE or age > MAX_AGE:
        raise InvalidAge(
            f"Given age ({age}) is not between sensible age range of {MIN_AGE} and {MAX_AGE}"
        )
    today = today or date.today()
    rng = rng or _random

    year = today.year - age
    # Birthdays up to today's date fall in ``year``, later ones in ``year - 1``.
    # On 31.12. there are no later ones.
    if not (
        _encodable(year)
        or (_encodable(year - 1) and (today.month, today.day) != (12, 31))
    ):
        raise InvalidAge(
            f"Given age ({age}) needs a birth year outside "
            f"{FIRST_ENCODABLE_YEAR}–{LAST_ENCODABLE_YEAR}, which PICs cannot encode"
        )

    # Draw again when the birth year leaves the window, or when 29 February
    # picked for a leap target year lands in a common year.
    while True:
        month = f"{rng.randint(1, 12):02d}"
        day = rng.randint(1, days_in_month(year, month))
        birth_year = year
        if not birthday_passed(date(year, int(month), day), today):
            birth_year -= 1
        if _encodable(birth_year) and is_valid_day(birth_year, month, day):
            break

    sign = rng.choice(SIGNS_BY_CENTURY[birth_year // 100 * 100])
    rolling_id = str(rng.randint(MIN_GENERATED_ROLLING_ID, MAX_GENERATED_ROLLING_ID))
    day_str = f"{day:02d}"
    short_year = f"{birth_year % 100:02d}"

    pic = (
        day_str
        + month
        + short_year
        + sign
        + rolling_id
        + checksum(checksum_base(day_str, month, short_year, rolling_id))
    )
    logger.debug("Generated PIC for age %d: %s", age, pic)
    return pic
