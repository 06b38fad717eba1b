"""
Value types stored in sentence fields.
"""

import datetime
import re
from enum import Enum
from typing import NamedTuple

from .errors import InvalidArgument, ParseError

_TIME_RE = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2}(?:\.[0-9]+)?)\Z")
_HUNDREDTHS_PER_DAY = 24 * 60 * 6000


class DataStatus(str, Enum):
    """Data quality status, encoded as a single character."""
    ACTIVE = "A"
    VOID = "V"

    @classmethod
    def from_char(cls, char: str) -> "DataStatus":
        try:
            return cls(char)
        except ValueError:
            raise ParseError(f"unknown data status: {char!r}") from None

    def to_char(self) -> str:
        return self.value


class Date(NamedTuple):
    """
    Calendar date as carried by the day, month and year fields.

    Day-of-month correctness is not checked; use to_date() for a
    validated datetime.date.
    """
    year: int
    month: int
    day: int

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, date: datetime.date) -> "Date":
        return cls(date.year, date.month, date.day)


class Time(NamedTuple):
    """
    UTC time of day in the hhmmss.ss field format.

    Seconds are rounded to hundredths when formatted, carrying into the
    minutes and hours.

    Examples:
        Time(10, 23, 8.0) -> "102308.00"
        Time(10, 23, 59.996) -> "102400.00"
    """
    hour: int
    minutes: int
    seconds: float = 0.0

    def __str__(self) -> str:
        if not 0 <= self.hour <= 23:
            raise InvalidArgument(f"hour must be 0-23, got {self.hour}")
        if not 0 <= self.minutes <= 59:
            raise InvalidArgument(f"minutes must be 0-59, got {self.minutes}")
        if not 0 <= self.seconds < 60:
            raise InvalidArgument(f"seconds must be 0-59.99, got {self.seconds}")

        total = (self.hour * 60 + self.minutes) * 6000 + round(self.seconds * 100)
        if total >= _HUNDREDTHS_PER_DAY:
            raise InvalidArgument(f"time rounds past midnight: {self.hour}:{self.minutes}:{self.seconds}")
        minutes, hundredths = divmod(total, 6000)
        hour, minutes = divmod(minutes, 60)
        return f"{hour:02d}{minutes:02d}{hundredths // 100:02d}.{hundredths % 100:02d}"

    @classmethod
    def parse(cls, text: str) -> "Time":
        """Parse hhmmss or hhmmss.ss field text."""
        match = _TIME_RE.match(text)
        if not match:
            raise ParseError(f"invalid time: {text!r}")
        hour, minutes, seconds = match.groups()
        return cls(int(hour), int(minutes), float(seconds))

    def to_time(self) -> datetime.time:
        whole = int(self.seconds)
        micro = min(round((self.seconds - whole) * 1_000_000), 999_999)
        try:
            return datetime.time(self.hour, self.minutes, whole, micro, tzinfo=datetime.timezone.utc)
        except ValueError as e:
            raise ParseError(f"invalid time {tuple(self)}: {e}") from None

    @classmethod
    def from_time(cls, time: datetime.time) -> "Time":
        return cls(time.hour, time.minute, time.second + time.microsecond / 1_000_000)
