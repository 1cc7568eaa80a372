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

import pytest

from typedjson.exception import InvalidDateForMidnight, InvalidDateTimeFormat, InvalidZoneForMidnight
from typedjson.iso8601 import (
    Date,
    DateTz,
    Datetime,
    DatetimeTz,
    Iso8601UtilConfiguration,
    Time,
    TimeTz,
    generate,
    parse,
    parse_date,
    parse_date_tz,
    parse_datetime,
    parse_datetime_tz,
    parse_time,
    parse_time_tz,
)


class TestFraction:
    @pytest.mark.parametrize('text, time', [
        ('15:46:09', Time(15, 46, 9)),
        ('15:46:09.1', Time(15, 46, 9, 100)),
        ('15:46:09,5', Time(15, 46, 9, 500)),
        ('15:46:09.12345678', Time(15, 46, 9, 123)),
        ('15:46:09.99949', Time(15, 46, 9, 999)),
        ('15:46:09.9995', Time(15, 46, 10, 0)),
        ('15:46:59.9999', Time(15, 47, 0, 0)),
    ])
    def test_rounding(self, text: str, time: Time) -> None:
        assert parse_time(text) == time

    def test_decimal_sign_needs_a_digit(self) -> None:
        with pytest.raises(InvalidDateTimeFormat, match="expected a digit at position 9 in '15:46:09.'"):
            parse_time('15:46:09.')
        with pytest.raises(InvalidDateTimeFormat):
            parse_datetime('2020-01-01T15:46:09,+01:00')

    def test_rounding_carries_into_the_date(self) -> None:
        assert parse_datetime('2005-12-31T23:59:59.9995') == Datetime(Date(2006, 1, 1), Time(0))

    def test_leap_second(self) -> None:
        assert parse_time('10:00:60') == Time(10, 1, 0)
        assert parse_datetime('1998-12-31T23:59:60.000Z') == Datetime(Date(1999, 1, 1), Time(0))
        assert parse_time_tz('23:59:60.5+01:00') == TimeTz(Time(0, 0, 0, 500), 60)


class TestZone:
    @pytest.mark.parametrize('text', [
        '2005-01-31T09:59:59.123+01:00',
        '2005-01-31T09:59:59.123+0100',
        '2005-01-31T08:59:59.123Z',
        '2005-01-31T08:59:59.123',
        '2005-01-31T07:29:59.123-01:30',
    ])
    def test_converted_to_utc(self, text: str) -> None:
        assert parse_datetime(text) == Datetime(Date(2005, 1, 31), Time(8, 59, 59, 123))

    def test_time_wraps_around(self) -> None:
        assert parse_time('00:30:00+01:00') == Time(23, 30)
        assert parse_time('23:30:00-01:00') == Time(0, 30)

    def test_zoned_types_keep_local_value(self) -> None:
        assert parse_time_tz('15:46:09.330+04:30') == TimeTz(Time(15, 46, 9, 330), 270)
        assert parse_date_tz('2020-01-01-05:30') == DateTz(Date(2020, 1, 1), -330)
        assert parse_date_tz('2020-01-01') == DateTz(Date(2020, 1, 1), 0)
        assert parse_datetime_tz('0001-01-01T00:00:00+00:01') == DatetimeTz(Datetime(Date(), Time(0)), 1)

    def test_date_zone_is_ignored(self) -> None:
        assert parse_date('2020-01-01+05:00') == Date(2020, 1, 1)
        assert parse_date('2020-01-01Z') == Date(2020, 1, 1)

    @pytest.mark.parametrize('text', [
        '2020-01-01+24:00',
        '2020-01-01+01:60',
        '2020-01-01+1:00',
        '2020-01-01 +01:00',
        '2020-01-01z',
        '2020-01-01+01:00:00',
    ])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_date(text)


class TestEndOfDay:
    def test_default_values(self) -> None:
        assert parse_time('24:00:00') == Time()
        assert parse_time('24:00:00.000Z') == Time()
        assert parse_time_tz('24:00:00+00:00') == TimeTz()
        assert parse_datetime('0001-01-01T24:00:00') == Datetime()
        assert parse_datetime_tz('0001-01-01T24:00:00.000+00:00') == DatetimeTz()

    def test_only_midnight(self) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_time('24:00:01')
        with pytest.raises(InvalidDateTimeFormat):
            parse_time('24:00:00.001')

    def test_zone_must_be_utc(self) -> None:
        with pytest.raises(InvalidZoneForMidnight):
            parse_time('24:00:00+01:00')
        with pytest.raises(InvalidZoneForMidnight):
            parse_time_tz('24:00:00-00:30')
        with pytest.raises(InvalidZoneForMidnight):
            parse_datetime('0001-01-01T24:00:00+01:00')

    def test_date_must_be_default(self) -> None:
        with pytest.raises(InvalidDateForMidnight):
            parse_datetime('2020-01-01T24:00:00')
        with pytest.raises(InvalidDateForMidnight):
            parse_datetime_tz('2020-01-01T24:00:00Z')

    def test_advance_midnight(self) -> None:
        assert parse_datetime('2020-01-01T24:00:00', advance_midnight=True) == Datetime(Date(2020, 1, 2), Time(0))
        assert parse_datetime_tz('2020-12-31T24:00:00Z', advance_midnight=True) == \
            DatetimeTz(Datetime(Date(2021, 1, 1), Time(0)), 0)
        with pytest.raises(InvalidDateTimeFormat):
            parse_datetime('9999-12-31T24:00:00', advance_midnight=True)


class TestRange:
    def test_overflow(self) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_datetime('9999-12-31T23:59:59.9995')
        with pytest.raises(InvalidDateTimeFormat):
            parse_datetime('9999-12-31T23:30:00-01:00')

    def test_underflow(self) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_datetime('0001-01-01T00:00:00+00:01')

    @pytest.mark.parametrize('text', ['0000-01-01', '2021-02-29', '2020-00-10', '2020-01-32'])
    def test_invalid_dates(self, text: str) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_date(text)


class TestInput:
    def test_exact_length(self) -> None:
        with pytest.raises(InvalidDateTimeFormat, match="expected a digit at position 9 in '2020-01-0'"):
            parse_date('2020-01-0')

    def test_length_limits_the_input(self) -> None:
        assert parse_date('2020-01-01xyz', 10) == Date(2020, 1, 1)
        with pytest.raises(InvalidDateTimeFormat):
            parse_date('2020-01-01', 9)
        with pytest.raises(InvalidDateTimeFormat):
            parse_date('2020-01-01', 11)

    def test_bytes(self) -> None:
        assert parse_date(b'2020-01-01') == Date(2020, 1, 1)
        assert parse_time(bytearray(b'10:00:00xx'), 8) == Time(10)
        with pytest.raises(InvalidDateTimeFormat):
            parse_date('2020-01-01'.encode('utf-16'))

    def test_bytes_past_length_are_not_read(self) -> None:
        assert parse_date(b'2020-01-01\xff', 10) == Date(2020, 1, 1)
        assert parse_time_tz(b'10:00:00Z\xc3\xa9', 9) == TimeTz(Time(10), 0)
        with pytest.raises(InvalidDateTimeFormat, match='non-ASCII input'):
            parse_date(b'2020-01-01\xff', 11)

    @pytest.mark.parametrize('text', [
        '',
        '2020-01-01 ',
        '2020-1-01',
        '20200101',
        '2020-01-01T10:00:00',
        '٢٠٢٠-01-01',
    ])
    def test_malformed_dates(self, text: str) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_date(text)

    @pytest.mark.parametrize('text', ['10:00', '10:00:00.5.5', '1:00:00', '10-00-00', '2020-01-01 10:00:00',
                                      '15:46:09.', '15:46:09,', '15:46:09.Z'])
    def test_malformed_times(self, text: str) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_time(text)

    def test_datetime_needs_separator(self) -> None:
        with pytest.raises(InvalidDateTimeFormat):
            parse_datetime('2020-01-01 10:00:00')


class TestParse:
    def test_dispatch(self) -> None:
        assert parse(Date, '2020-01-01') == Date(2020, 1, 1)
        assert parse(Datetime, '2020-01-01T24:00:00', advance_midnight=True) == Datetime(Date(2020, 1, 2), Time(0))
        assert parse(TimeTz, '10:00:00+01:00') == TimeTz(Time(10), 60)

    def test_not_a_calendar_type(self) -> None:
        with pytest.raises(TypeError):
            parse(int, '1')

    @pytest.mark.parametrize('value', [
        Date(2024, 2, 29),
        Time(0, 0, 0, 1),
        Time(),
        Datetime(Date(1, 1, 1), Time(0)),
        Datetime(),
        DateTz(Date(9999, 12, 31), -1439),
        TimeTz(Time(12), 1439),
        DatetimeTz(Datetime(Date(2005, 1, 31), Time(8, 59, 59, 123)), -330),
    ])
    @pytest.mark.parametrize('configuration', [
        Iso8601UtilConfiguration(),
        Iso8601UtilConfiguration(decimal_sign_for_fractional_seconds=',', omit_colon_in_zone_designator=True,
                                 use_z_for_utc_zone_designator=True),
    ])
    def test_generated_text_is_parsed_back(self, value: object, configuration: Iso8601UtilConfiguration) -> None:
        assert parse(type(value), generate(value, configuration)) == value  # type: ignore[arg-type]
