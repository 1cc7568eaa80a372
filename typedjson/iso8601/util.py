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
Conversion of the calendar scalars to and from ISO-8601 text.

Generation has a fixed shape, the only variations are the ones in `Iso8601UtilConfiguration`:

>>> generate(Date(2005, 1, 31))
'2005-01-31'
>>> generate(Time(2, 4, 9, 7))
'02:04:09.007'
>>> generate(DatetimeTz(Datetime(Date(2005, 1, 31), Time(8, 59, 59, 123)), -330))
'2005-01-31T08:59:59.123-05:30'
>>> generate(TimeTz(Time(8, 59, 59, 123), 0), Iso8601UtilConfiguration(use_z_for_utc_zone_designator=True))
'08:59:59.123Z'

Parsing accepts more than what is generated: any number of fractional digits (rounded to the nearest millisecond),
',' as decimal sign, the zone designator as `+hh:mm`, `+hhmm` or `Z`, and no zone at all (meaning UTC). The whole
text must be consumed:

>>> parse_time('15:46:09.9995')
Time(hour=15, minute=46, second=10, millisecond=0)
>>> parse_datetime('2005-01-31T08:59:59,5+0100')
Datetime(date=Date(year=2005, month=1, day=31), time=Time(hour=7, minute=59, second=59, millisecond=500))
>>> parse_date('2020-01-0')
Traceback (most recent call last):
...
typedjson.exception.InvalidDateTimeFormat: expected a digit at position 9 in '2020-01-0'
"""

from typing import Callable, NamedTuple, Optional, TextIO, TypeVar, Union

from typedjson.exception import InvalidDateForMidnight, InvalidDateTimeFormat, InvalidZoneForMidnight
from typedjson.iso8601.configuration import DEFAULT_CONFIGURATION, Iso8601UtilConfiguration
from typedjson.iso8601.types import (
    CALENDAR_TYPES,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    Date,
    DateTz,
    Datetime,
    DatetimeTz,
    Time,
    TimeTz,
)

T = TypeVar('T')

CalendarValue = Union[Date, Time, Datetime, DateTz, TimeTz, DatetimeTz]
Text = Union[str, bytes, bytearray, memoryview]

# length of the generated strings
DATE_STRLEN = 10
TIME_STRLEN = 12
DATETIME_STRLEN = 23
DATETZ_STRLEN = 16
TIMETZ_STRLEN = 18
DATETIMETZ_STRLEN = 29

# longest generated string, handy for sizing buffers
MAX_STRLEN = DATETIMETZ_STRLEN

_DIGITS = '0123456789'


def _generate_date(date: Date) -> str:
    return f'{date.year:04d}-{date.month:02d}-{date.day:02d}'


def _generate_time(time: Time, configuration: Iso8601UtilConfiguration) -> str:
    sign = configuration.decimal_sign_for_fractional_seconds
    return f'{time.hour:02d}:{time.minute:02d}:{time.second:02d}{sign}{time.millisecond:03d}'


def _generate_datetime(datetime: Datetime, configuration: Iso8601UtilConfiguration) -> str:
    return f'{_generate_date(datetime.date)}T{_generate_time(datetime.time, configuration)}'


def _generate_zone(offset: int, configuration: Iso8601UtilConfiguration) -> str:
    if offset == 0 and configuration.use_z_for_utc_zone_designator:
        return 'Z'
    sign = '-' if offset < 0 else '+'
    hours, minutes = divmod(abs(offset), 60)
    separator = '' if configuration.omit_colon_in_zone_designator else ':'
    return f'{sign}{hours:02d}{separator}{minutes:02d}'


def is_calendar_value(value: object) -> bool:
    return isinstance(value, CALENDAR_TYPES)


def generate(value: CalendarValue, configuration: Optional[Iso8601UtilConfiguration] = None) -> str:
    """Return the ISO-8601 representation of `value`, raises TypeError if it is not a calendar scalar."""
    conf = configuration or DEFAULT_CONFIGURATION
    match value:
        case Date():
            return _generate_date(value)
        case Time():
            return _generate_time(value, conf)
        case Datetime():
            return _generate_datetime(value, conf)
        case DateTz():
            return _generate_date(value.date) + _generate_zone(value.offset, conf)
        case TimeTz():
            return _generate_time(value.time, conf) + _generate_zone(value.offset, conf)
        case DatetimeTz():
            return _generate_datetime(value.datetime, conf) + _generate_zone(value.offset, conf)
        case _:
            raise TypeError(f'not a calendar value: {type(value).__name__}')


def generate_to(stream: TextIO, value: CalendarValue,
                configuration: Optional[Iso8601UtilConfiguration] = None) -> int:
    """Write the ISO-8601 representation of `value` to `stream`, returns the number of characters written."""
    text = generate(value, configuration)
    stream.write(text)
    return len(text)


class _Cursor:
    """Reads an ISO-8601 string left to right, every failure is an InvalidDateTimeFormat."""

    __slots__ = ('_text', '_pos')

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def text(self) -> str:
        return self._text

    def fail(self, message: str) -> InvalidDateTimeFormat:
        return InvalidDateTimeFormat(f'{message} at position {self._pos} in {self._text!r}')

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ''

    def accept(self, chars: str) -> str:
        """Consume the next character if it is one of `chars`, returns it or '' otherwise."""
        char = self.peek()
        if char and char in chars:
            self._pos += 1
            return char
        return ''

    def expect(self, char: str) -> None:
        if not self.accept(char):
            raise self.fail(f'expected {char!r}')

    def digits(self, count: int) -> int:
        """Consume exactly `count` ASCII digits."""
        value = 0
        for _ in range(count):
            char = self.accept(_DIGITS)
            if not char:
                raise self.fail('expected a digit')
            value = value * 10 + int(char)
        return value

    def digit_run(self) -> str:
        start = self._pos
        while self.accept(_DIGITS):
            pass
        return self._text[start:self._pos]

    def finish(self) -> None:
        if not self.at_end():
            raise self.fail('unexpected trailing characters')


class _RawTime(NamedTuple):
    """A time of day as written, before leap second and rounding carries are applied."""
    hour: int
    minute: int
    second: int
    millisecond: int
    carry_seconds: int

    def is_midnight_sentinel(self) -> bool:
        return self.hour == 24

    def to_milliseconds(self) -> int:
        return (self.hour * 60 + self.minute) * MS_PER_MINUTE + self.second * MS_PER_SECOND + self.millisecond \
            + self.carry_seconds * MS_PER_SECOND


def _prepare(text: Text, length: Optional[int]) -> _Cursor:
    if length is None:
        length = len(text)
    if length < 0 or length > len(text):
        raise InvalidDateTimeFormat(f'invalid length {length} for input of length {len(text)}')
    text = text[:length]
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            text = bytes(text).decode('ascii')
        except UnicodeDecodeError as e:
            raise InvalidDateTimeFormat('non-ASCII input') from e
    return _Cursor(text)


def _parse_date_fields(cursor: _Cursor) -> Date:
    year = cursor.digits(4)
    cursor.expect('-')
    month = cursor.digits(2)
    cursor.expect('-')
    day = cursor.digits(2)
    try:
        return Date(year, month, day)
    except ValueError as e:
        raise cursor.fail(f'invalid date {year:04d}-{month:02d}-{day:02d}') from e


def _parse_time_fields(cursor: _Cursor) -> _RawTime:
    hour = cursor.digits(2)
    cursor.expect(':')
    minute = cursor.digits(2)
    cursor.expect(':')
    second = cursor.digits(2)
    millisecond = 0
    if cursor.accept('.,'):
        fraction = cursor.digit_run()
        if not fraction:
            raise cursor.fail('expected a digit')
        millisecond = int(fraction[:3].ljust(3, '0'))
        # round half up on the first dropped digit
        if len(fraction) > 3 and fraction[3] >= '5':
            millisecond += 1
    if hour > 24 or minute > 59 or second > 60:
        raise cursor.fail(f'invalid time {hour:02d}:{minute:02d}:{second:02d}')
    if hour == 24 and (minute or second or millisecond):
        raise cursor.fail('only 24:00:00.000 is allowed with hour 24')
    carry_seconds = 0
    if second == 60:
        # leap second, read as 59 and add one second afterwards
        second = 59
        carry_seconds += 1
    if millisecond == 1000:
        millisecond = 0
        carry_seconds += 1
    return _RawTime(hour, minute, second, millisecond, carry_seconds)


def _parse_zone(cursor: _Cursor) -> Optional[int]:
    """Parse an optional zone designator, returns the offset in minutes or None if absent."""
    if cursor.at_end():
        return None
    if cursor.accept('Z'):
        return 0
    sign = cursor.accept('+-')
    if not sign:
        raise cursor.fail('expected a zone designator')
    hours = cursor.digits(2)
    cursor.accept(':')
    minutes = cursor.digits(2)
    if hours > 23 or minutes > 59:
        raise cursor.fail(f'invalid zone designator {sign}{hours:02d}:{minutes:02d}')
    offset = hours * 60 + minutes
    return -offset if sign == '-' else offset


def _end_of_day(cursor: _Cursor, date: Date, offset: Optional[int], advance_midnight: bool) -> Datetime:
    if offset:
        raise InvalidZoneForMidnight(f'24:00 requires a UTC zone designator in {cursor.text!r}')
    if date == Date():
        return Datetime()
    if advance_midnight:
        try:
            return Datetime(date.add_days(1), Time(0))
        except ValueError as e:
            raise cursor.fail('date out of range') from e
    raise InvalidDateForMidnight(f'24:00 is only allowed with the default date in {cursor.text!r}')


def _local_datetime(cursor: _Cursor, date: Date, raw: _RawTime, shift_minutes: int) -> Datetime:
    try:
        return Datetime(date, Time(0)).add_milliseconds(raw.to_milliseconds() - shift_minutes * MS_PER_MINUTE)
    except ValueError as e:
        raise cursor.fail('date out of range') from e


def parse_date(text: Text, length: Optional[int] = None) -> Date:
    """Parse `YYYY-MM-DD` with an optional zone designator, which is validated and ignored."""
    cursor = _prepare(text, length)
    date = _parse_date_fields(cursor)
    _parse_zone(cursor)
    cursor.finish()
    return date


def parse_date_tz(text: Text, length: Optional[int] = None) -> DateTz:
    cursor = _prepare(text, length)
    date = _parse_date_fields(cursor)
    offset = _parse_zone(cursor)
    cursor.finish()
    return DateTz(date, offset or 0)


def parse_time(text: Text, length: Optional[int] = None) -> Time:
    """Parse `hh:mm:ss[.s+][zone]`, the result is converted to UTC."""
    cursor = _prepare(text, length)
    raw = _parse_time_fields(cursor)
    offset = _parse_zone(cursor)
    cursor.finish()
    if raw.is_midnight_sentinel():
        if offset:
            raise InvalidZoneForMidnight(f'24:00 requires a UTC zone designator in {cursor.text!r}')
        return Time()
    return Time.from_milliseconds(raw.to_milliseconds() - (offset or 0) * MS_PER_MINUTE)


def parse_time_tz(text: Text, length: Optional[int] = None) -> TimeTz:
    cursor = _prepare(text, length)
    raw = _parse_time_fields(cursor)
    offset = _parse_zone(cursor)
    cursor.finish()
    if raw.is_midnight_sentinel():
        if offset:
            raise InvalidZoneForMidnight(f'24:00 requires a UTC zone designator in {cursor.text!r}')
        return TimeTz()
    return TimeTz(Time.from_milliseconds(raw.to_milliseconds()), offset or 0)


def parse_datetime(text: Text, length: Optional[int] = None, *, advance_midnight: bool = False) -> Datetime:
    """Parse `YYYY-MM-DDThh:mm:ss[.s+][zone]`, the result is converted to UTC.

    With `advance_midnight`, 24:00 on a date other than the default one is read as 00:00 of the next day instead of
    failing with InvalidDateForMidnight.
    """
    cursor = _prepare(text, length)
    date = _parse_date_fields(cursor)
    cursor.expect('T')
    raw = _parse_time_fields(cursor)
    offset = _parse_zone(cursor)
    cursor.finish()
    if raw.is_midnight_sentinel():
        return _end_of_day(cursor, date, offset, advance_midnight)
    return _local_datetime(cursor, date, raw, offset or 0)


def parse_datetime_tz(text: Text, length: Optional[int] = None, *, advance_midnight: bool = False) -> DatetimeTz:
    cursor = _prepare(text, length)
    date = _parse_date_fields(cursor)
    cursor.expect('T')
    raw = _parse_time_fields(cursor)
    offset = _parse_zone(cursor)
    cursor.finish()
    if raw.is_midnight_sentinel():
        return DatetimeTz(_end_of_day(cursor, date, offset, advance_midnight), 0)
    return DatetimeTz(_local_datetime(cursor, date, raw, 0), offset or 0)


_PARSERS: dict[type, Callable[..., CalendarValue]] = {
    Date: parse_date,
    Time: parse_time,
    Datetime: parse_datetime,
    DateTz: parse_date_tz,
    TimeTz: parse_time_tz,
    DatetimeTz: parse_datetime_tz,
}

_MIDNIGHT_AWARE = (Datetime, DatetimeTz)


def parse(type_: type[T], text: Text, length: Optional[int] = None, *, advance_midnight: bool = False) -> T:
    """Parse `text` as the calendar type `type_`, raises TypeError if `type_` is not one."""
    parser = _PARSERS.get(type_)
    if parser is None:
        raise TypeError(f'not a calendar type: {type_.__name__}')
    if type_ in _MIDNIGHT_AWARE:
        return parser(text, length, advance_midnight=advance_midnight)  # type: ignore[return-value]
    return parser(text, length)  # type: ignore[return-value]
