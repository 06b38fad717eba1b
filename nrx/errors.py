"""Errors raised by the NRX codec."""


class NRXError(Exception):
    """Base error for this package."""


class DataNotAvailable(NRXError):
    """Raised when a field accessor is invoked on an empty field."""


class ParseError(NRXError, ValueError):
    """Raised when text cannot be coerced to the requested type or sentence."""


class ChecksumMismatch(ParseError):
    """Raised when the computed checksum disagrees with the wire checksum."""


class InvalidArgument(NRXError, ValueError):
    """Raised when a setter is given a value it cannot store."""


class MalformedEscape(NRXError, ValueError):
    """Raised when an escape token is truncated or not hexadecimal."""


class SeriesError(NRXError):
    """Base error for reassembling a sentence series."""


class SeriesIncomplete(SeriesError):
    """Raised when sentences of a series are missing."""


class SeriesMismatch(SeriesError):
    """Raised when sentences disagree on the series they belong to."""
