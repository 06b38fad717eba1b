"""
Accessor groups shared by sentences that carry a time or a date.

Mix these into a Sentence subclass and point the *_FIELD attributes at the
schema's field indices.
"""

import datetime

from .errors import InvalidArgument
from .values import Date, Time


class TimeSentenceMixin:
    """Sentence with a UTC time field in hhmmss.ss format."""

    TIME_FIELD: int

    def get_time(self) -> Time:
        return Time.parse(self.get_field(self.TIME_FIELD))

    def set_time(self, time: Time):
        if isinstance(time, datetime.time):
            time = Time.from_time(time)
        return self.set_field(self.TIME_FIELD, str(time))


class DateSentenceMixin:
    """Sentence with separate day, month and four digit year fields."""

    DAY_FIELD: int
    MONTH_FIELD: int
    YEAR_FIELD: int

    def get_date(self) -> Date:
        year = self.get_int_field(self.YEAR_FIELD)
        month = self.get_int_field(self.MONTH_FIELD)
        day = self.get_int_field(self.DAY_FIELD)
        return Date(year, month, day)

    def set_date(self, date: Date):
        if isinstance(date, datetime.date):
            date = Date.from_date(date)

        # Checked up front so a rejected date leaves all three fields unchanged
        for name, value in zip(Date._fields, date):
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise InvalidArgument(f"date {name} must be a non-negative integer, got {value!r}")

        self.set_int_field(self.YEAR_FIELD, date.year, 4)
        self.set_int_field(self.MONTH_FIELD, date.month, 2)
        return self.set_int_field(self.DAY_FIELD, date.day, 2)
