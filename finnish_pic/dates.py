from __future__ import annotations
from datetime import date
from .exceptions import InvalidDate
from .tables import DAYS_IN_MONTH, FEBRUARY


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4 but not by 100, or divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: str) -> int:
    """Return the length of ``month`` (two-digit string, "01"–"12") in ``year``."""
    try:
        days = DAYS_IN_MONTH[month]
    except KeyError:
        raise InvalidDate(f"Unknown month {month!r}") from None
    if month == FEBRUARY and is_leap_year(year):
        return days + 1
    return days


def is_valid_day(year: int, month: str, day: int) -> bool:
    """Return True if ``day`` exists in the given month; unknown months raise InvalidDate."""
    return 1 <= day <= days_in_month(year, month)


def birthday_passed(date_of_birth: date, today: date) -> bool:
    """True if the birthday has occurred this year, today included."""
    return (date_of_birth.month, date_of_birth.day) <= (today.month, today.day)


def age_in_years(date_of_birth: date, today: date) -> int:
    age = today.year - date_of_birth.year
    if not birthday_passed(date_of_birth, today):
        age -= 1
    return age
