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
This module exports the codec entry points, the value model and the calendar types.
"""

from typedjson.codec import Decoder, DecoderOptions, Encoder, EncoderOptions, EncodingStyle
from typedjson.exception import (
    DecodeError,
    EncodeError,
    InvalidDateTimeFormat,
    JsonSyntaxError,
    RecursionLimitExceeded,
    SchemaViolation,
    TypedJsonError,
    TypeMismatch,
    ValidationFailure,
)
from typedjson.iso8601 import Date, DateTz, Datetime, DatetimeTz, Iso8601UtilConfiguration, Time, TimeTz
from typedjson.model import (
    ArrayValue,
    Category,
    Char,
    Choice,
    CustomizedType,
    DynamicSlot,
    Enumeration,
    FormattingMode,
    NullableValue,
    SequenceValue,
    attribute,
    selection,
)
from typedjson.version import __version__

__all__ = [
    'Decoder',
    'DecoderOptions',
    'Encoder',
    'EncoderOptions',
    'EncodingStyle',
    'DecodeError',
    'EncodeError',
    'InvalidDateTimeFormat',
    'JsonSyntaxError',
    'RecursionLimitExceeded',
    'SchemaViolation',
    'TypedJsonError',
    'TypeMismatch',
    'ValidationFailure',
    'Date',
    'DateTz',
    'Datetime',
    'DatetimeTz',
    'Iso8601UtilConfiguration',
    'Time',
    'TimeTz',
    'ArrayValue',
    'Category',
    'Char',
    'Choice',
    'CustomizedType',
    'DynamicSlot',
    'Enumeration',
    'FormattingMode',
    'NullableValue',
    'SequenceValue',
    'attribute',
    'selection',
    '__version__',
]
