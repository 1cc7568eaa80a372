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

from typedjson.iso8601.configuration import Iso8601UtilConfiguration
from typedjson.iso8601.types import CALENDAR_TYPES, Date, DateTz, Datetime, DatetimeTz, Time, TimeTz
from typedjson.iso8601.util import (
    DATE_STRLEN,
    DATETIME_STRLEN,
    DATETIMETZ_STRLEN,
    DATETZ_STRLEN,
    MAX_STRLEN,
    TIME_STRLEN,
    TIMETZ_STRLEN,
    CalendarValue,
    generate,
    generate_to,
    is_calendar_value,
    parse,
    parse_date,
    parse_date_tz,
    parse_datetime,
    parse_datetime_tz,
    parse_time,
    parse_time_tz,
)

__all__ = [
    'CALENDAR_TYPES',
    'DATE_STRLEN',
    'DATETIME_STRLEN',
    'DATETIMETZ_STRLEN',
    'DATETZ_STRLEN',
    'MAX_STRLEN',
    'TIME_STRLEN',
    'TIMETZ_STRLEN',
    'CalendarValue',
    'Date',
    'DateTz',
    'Datetime',
    'DatetimeTz',
    'Iso8601UtilConfiguration',
    'Time',
    'TimeTz',
    'generate',
    'generate_to',
    'is_calendar_value',
    'parse',
    'parse_date',
    'parse_date_tz',
    'parse_datetime',
    'parse_datetime_tz',
    'parse_time',
    'parse_time_tz',
]
