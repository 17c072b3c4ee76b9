"""
Exception hierarchy for finnish-pic.

Every error raised by the library derives from :class:`FinnishPicError`, so a
caller can catch one base class or tell the specific failures apart.
"""


class FinnishPicError(ValueError):
    """Base exception for all finnish-pic errors."""

    pass


class InvalidFormat(FinnishPicError):
    """Raised when a string is not shaped like a PIC at all."""

    pass


class InvalidDate(FinnishPicError):
    """Raised when a well-formed PIC names a day that does not exist."""

    pass


class InvalidAge(FinnishPicError):
    """Raised when a PIC cannot be generated for the requested age."""

    pass
