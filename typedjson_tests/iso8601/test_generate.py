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

import io

import pytest

from typedjson.iso8601 import (
    DATE_STRLEN,
    DATETIME_STRLEN,
    DATETIMETZ_STRLEN,
    DATETZ_STRLEN,
    MAX_STRLEN,
    TIME_STRLEN,
    TIMETZ_STRLEN,
    Date,
    DateTz,
    Datetime,
    DatetimeTz,
    Iso8601UtilConfiguration,
    Time,
    TimeTz,
    generate,
    generate_to,
    is_calendar_value,
)

DATE = Date(2005, 1, 31)
TIME = Time(8, 59, 59, 123)
DATETIME = Datetime(DATE, TIME)


@pytest.mark.parametrize('value, expected', [
    (DATE, '2005-01-31'),
    (TIME, '08:59:59.123'),
    (DATETIME, '2005-01-31T08:59:59.123'),
    (DateTz(DATE, 0), '2005-01-31+00:00'),
    (TimeTz(TIME, 90), '08:59:59.123+01:30'),
    (DatetimeTz(DATETIME, -1439), '2005-01-31T08:59:59.123-23:59'),
    (Date(), '0001-01-01'),
    (Time(), '24:00:00.000'),
    (Datetime(), '0001-01-01T24:00:00.000'),
    (Time(0, 0, 0, 7), '00:00:00.007'),
])
def test_generate(value: object, expected: str) -> None:
    assert generate(value) == expected  # type: ignore[arg-type]


@pytest.mark.parametrize('value, length', [
    (DATE, DATE_STRLEN),
    (TIME, TIME_STRLEN),
    (DATETIME, DATETIME_STRLEN),
    (DateTz(DATE, -60), DATETZ_STRLEN),
    (TimeTz(TIME, 60), TIMETZ_STRLEN),
    (DatetimeTz(DATETIME, 0), DATETIMETZ_STRLEN),
])
def test_generated_lengths(value: object, length: int) -> None:
    text = generate(value)  # type: ignore[arg-type]
    assert len(text) == length
    assert length <= MAX_STRLEN


def test_decimal_comma() -> None:
    configuration = Iso8601UtilConfiguration(decimal_sign_for_fractional_seconds=',')
    assert generate(TIME, configuration) == '08:59:59,123'
    assert generate(DatetimeTz(DATETIME, 0), configuration) == '2005-01-31T08:59:59,123+00:00'


def test_omit_colon() -> None:
    configuration = Iso8601UtilConfiguration(omit_colon_in_zone_designator=True)
    assert generate(TimeTz(TIME, -330), configuration) == '08:59:59.123-0530'
    assert generate(DateTz(DATE, 0), configuration) == '2005-01-31+0000'


def test_use_z() -> None:
    configuration = Iso8601UtilConfiguration(use_z_for_utc_zone_designator=True)
    assert generate(DatetimeTz(DATETIME, 0), configuration) == '2005-01-31T08:59:59.123Z'
    # only a zero offset is written as Z
    assert generate(DateTz(DATE, 60), configuration) == '2005-01-31+01:00'


def test_invalid_configuration() -> None:
    from pydantic import ValidationError
    with pytest.raises(ValidationError):
        Iso8601UtilConfiguration(decimal_sign_for_fractional_seconds=';')  # type: ignore[arg-type]


def test_generate_to() -> None:
    stream = io.StringIO()
    assert generate_to(stream, DATE) == DATE_STRLEN
    assert generate_to(stream, TimeTz(TIME, 0)) == TIMETZ_STRLEN
    assert stream.getvalue() == '2005-01-3108:59:59.123+00:00'


def test_generate_non_calendar() -> None:
    assert not is_calendar_value('2005-01-31')
    assert is_calendar_value(DATE)
    with pytest.raises(TypeError):
        generate('2005-01-31')  # type: ignore[arg-type]
