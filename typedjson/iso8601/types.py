# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Calendar scalars with millisecond precision.

Dates are proleptic Gregorian dates between 0001-01-01 and 9999-12-31. The default `Time` is 24:00:00.000, the only
representation of "end of day", and it can only be combined with the default date (0001-01-01) and a zero offset, so
the default `Datetime` is 0001-01-01T24:00:00.000. In arithmetic, 24:00 counts as 00:00.

The zoned variants carry a UTC offset in minutes, strictly between -1440 and 1440, and the local value, the UTC value
being `local - offset`.

>>> Datetime(Date(2002, 3, 17), Time(23, 46, 9, 222)).add_milliseconds(5 * 3600 * 1000)
Datetime(date=Date(year=2002, month=3, day=18), time=Time(hour=4, minute=46, second=9, millisecond=222))
>>> TimeTz(Time(15, 46, 9, 330), 270).utc_time()
Time(hour=11, minute=16, second=9, millisecond=330)
"""

from __future__ import annotations

import datetime as _datetime
from dataclasses import dataclass, field
from typing import ClassVar

from typedjson.model.category import Category

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

MIN_ORDINAL = _datetime.date.min.toordinal()
MAX_ORDINAL = _datetime.date.max.toordinal()

# offsets are strictly within a day
MAX_OFFSET_MINUTES = 24 * 60 - 1


def _check_offset(offset: int) -> None:
    if not -MAX_OFFSET_MINUTES <= offset <= MAX_OFFSET_MINUTES:
        raise ValueError(f'offset out of range: {offset}')


@dataclass(frozen=True, slots=True)
class Date:
    CATEGORY: ClassVar[Category] = Category.SIMPLE

    year: int = 1
    month: int = 1
    day: int = 1

    def __post_init__(self) -> None:
        # datetime.date has the exact same valid range
        _datetime.date(self.year, self.month, self.day)

    def to_ordinal(self) -> int:
        """Serial day number, 0001-01-01 is day 1."""
        return _datetime.date(self.year, self.month, self.day).toordinal()

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        if not MIN_ORDINAL <= ordinal <= MAX_ORDINAL:
            raise ValueError(f'date out of range: ordinal {ordinal}')
        date = _datetime.date.fromordinal(ordinal)
        return cls(date.year, date.month, date.day)

    def add_days(self, days: int) -> Date:
        return Date.from_ordinal(self.to_ordinal() + days)


@dataclass(frozen=True, slots=True)
class Time:
    CATEGORY: ClassVar[Category] = Category.SIMPLE

    hour: int = 24
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def __post_init__(self) -> None:
        if self.hour == 24:
            if self.minute or self.second or self.millisecond:
                raise ValueError('only 24:00:00.000 is valid for hour 24')
            return
        if not (0 <= self.hour < 24 and 0 <= self.minute < 60 and 0 <= self.second < 60
                and 0 <= self.millisecond < 1000):
            raise ValueError(f'invalid time: {self.hour}:{self.minute}:{self.second}.{self.millisecond}')

    def is_end_of_day(self) -> bool:
        return self.hour == 24

    def to_milliseconds(self) -> int:
        """Milliseconds since midnight, 24:00 counts as 00:00."""
        if self.hour == 24:
            return 0
        return (self.hour * MS_PER_HOUR + self.minute * MS_PER_MINUTE + self.second * MS_PER_SECOND
                + self.millisecond)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Time:
        """Build a time from milliseconds since midnight, wrapping around whole days."""
        milliseconds %= MS_PER_DAY
        hour, milliseconds = divmod(milliseconds, MS_PER_HOUR)
        minute, milliseconds = divmod(milliseconds, MS_PER_MINUTE)
        second, millisecond = divmod(milliseconds, MS_PER_SECOND)
        return cls(hour, minute, second, millisecond)

    def add_milliseconds(self, milliseconds: int) -> Time:
        return Time.from_milliseconds(self.to_milliseconds() + milliseconds)


@dataclass(frozen=True, slots=True)
class Datetime:
    CATEGORY: ClassVar[Category] = Category.SIMPLE

    date: Date = field(default_factory=Date)
    time: Time = field(default_factory=Time)

    def __post_init__(self) -> None:
        if self.time.is_end_of_day() and self.date != Date():
            raise ValueError('24:00 can only be combined with the default date')

    def to_milliseconds(self) -> int:
        """Milliseconds since 0001-01-01T00:00:00.000."""
        return (self.date.to_ordinal() - MIN_ORDINAL) * MS_PER_DAY + self.time.to_milliseconds()

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Datetime:
        days, milliseconds = divmod(milliseconds, MS_PER_DAY)
        return cls(Date.from_ordinal(MIN_ORDINAL + days), Time.from_milliseconds(milliseconds))

    def add_milliseconds(self, milliseconds: int) -> Datetime:
        """Raises a ValueError if the result is outside of the valid date range."""
        return Datetime.from_milliseconds(self.to_milliseconds() + milliseconds)


@dataclass(frozen=True, slots=True)
class DateTz:
    CATEGORY: ClassVar[Category] = Category.SIMPLE

    date: Date = field(default_factory=Date)
    offset: int = 0

    def __post_init__(self) -> None:
        _check_offset(self.offset)

    def local_date(self) -> Date:
        return self.date


@dataclass(frozen=True, slots=True)
class TimeTz:
    CATEGORY: ClassVar[Category] = Category.SIMPLE

    time: Time = field(default_factory=Time)
    offset: int = 0

    def __post_init__(self) -> None:
        _check_offset(self.offset)
        if self.time.is_end_of_day() and self.offset != 0:
            raise ValueError('24:00 can only be combined with a zero offset')

    def local_time(self) -> Time:
        return self.time

    def utc_time(self) -> Time:
        if self.time.is_end_of_day():
            return self.time
        return self.time.add_milliseconds(-self.offset * MS_PER_MINUTE)


@dataclass(frozen=True, slots=True)
class DatetimeTz:
    CATEGORY: ClassVar[Category] = Category.SIMPLE

    datetime: Datetime = field(default_factory=Datetime)
    offset: int = 0

    def __post_init__(self) -> None:
        _check_offset(self.offset)
        if self.datetime.time.is_end_of_day() and self.offset != 0:
            raise ValueError('24:00 can only be combined with a zero offset')

    def local_datetime(self) -> Datetime:
        return self.datetime

    def utc_datetime(self) -> Datetime:
        """Raises a ValueError if the UTC value is outside of the valid date range."""
        if self.datetime.time.is_end_of_day():
            return self.datetime
        return self.datetime.add_milliseconds(-self.offset * MS_PER_MINUTE)


CALENDAR_TYPES: tuple[type, ...] = (Date, Time, Datetime, DateTz, TimeTz, DatetimeTz)
