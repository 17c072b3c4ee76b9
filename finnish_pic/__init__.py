"""finnish-pic: parse, validate and generate Finnish personal identity codes (henkilötunnus)."""
from .checksum import checksum, verify
from .dates import days_in_month, is_leap_year
from .exceptions import FinnishPicError, InvalidAge, InvalidDate, InvalidFormat
from .models import FEMALE, MALE, Finding, ParsedPic, PiiType, Sex
from .pic import generate_with_age, matches, parse, validate

__all__ = [
    "FEMALE",
    "MALE",
    "Finding",
    "FinnishPicError",
    "InvalidAge",
    "InvalidDate",
    "InvalidFormat",
    "ParsedPic",
    "PiiType",
    "Sex",
    "checksum",
    "days_in_month",
    "generate_with_age",
    "is_leap_year",
    "matches",
    "parse",
    "validate",
    "verify",
]
