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
This module implements JSON number tokens.

Integers are written in decimal, floats with their shortest round-tripping `repr`. JSON has no representation for
infinities and NaN, so these are written as the strings "+inf", "-inf" and "nan":

>>> se = Serializer.build_str_serializer()
>>> encode_int(se, -42)
>>> se.write_char(' ')
>>> encode_float(se, 0.1)
>>> se.write_char(' ')
>>> encode_float(se, float('-inf'))
>>> se.finalize()
'-42 0.1 "-inf"'

Decoding follows the JSON number grammar strictly (no leading zeros, no leading '+', digits around the '.'):

>>> decode_number(Deserializer.build_str_deserializer('1e3'))
1000.0
>>> decode_int(Deserializer.build_str_deserializer('1e3'))
1000
>>> decode_float(Deserializer.build_str_deserializer('"+inf"'))
inf
>>> decode_number(Deserializer.build_str_deserializer('01'))
Traceback (most recent call last):
...
typedjson.serialization.exceptions.BadDataError: invalid number '01'
"""

import math
import re
from decimal import Decimal
from typing import Union

from typedjson.serialization import Deserializer, Serializer
from typedjson.serialization.consts import NUMBER_CHARS
from typedjson.serialization.exceptions import BadDataError

from .string import decode_string, encode_string

_NUMBER = re.compile(r'-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?')

_NON_FINITE_NAMES = {
    '+inf': math.inf,
    'inf': math.inf,
    '-inf': -math.inf,
    'nan': math.nan,
    '+nan': math.nan,
    '-nan': math.nan,
}


def _read_number_token(deserializer: Deserializer) -> tuple[str, bool]:
    """Read a number token, returns it and whether it is written as an integer."""
    token = deserializer.read_while(NUMBER_CHARS)
    match = _NUMBER.fullmatch(token)
    if match is None:
        raise BadDataError(f'invalid number {token!r}')
    return token, match.group(1) is None and match.group(2) is None


def encode_int(serializer: Serializer, value: int) -> None:
    assert isinstance(value, int) and not isinstance(value, bool)
    serializer.write_text(str(int(value)))


def encode_float(serializer: Serializer, value: float) -> None:
    """Write a float as a JSON number, or as a string if it is not finite."""
    if math.isnan(value):
        encode_string(serializer, 'nan')
    elif math.isinf(value):
        encode_string(serializer, '+inf' if value > 0 else '-inf')
    else:
        serializer.write_text(repr(float(value)))


def decode_number(deserializer: Deserializer) -> Union[int, float]:
    """Read a JSON number, which is an int when written without fraction and exponent, a float otherwise."""
    token, integral = _read_number_token(deserializer)
    try:
        return int(token) if integral else float(token)
    except ValueError as e:
        # int() refuses huge digit counts
        raise BadDataError(f'number out of range: {token[:20]}...') from e


def decode_int(deserializer: Deserializer) -> int:
    """Read a JSON number that must have an integral value, raises ValueError when it has a fractional part."""
    token, integral = _read_number_token(deserializer)
    if integral:
        try:
            return int(token)
        except ValueError as e:
            raise BadDataError(f'number out of range: {token[:20]}...') from e
    value = Decimal(token)
    if value != value.to_integral_value():
        raise ValueError(f'not an integral number: {token}')
    return int(value)


def decode_float(deserializer: Deserializer) -> float:
    """Read a JSON number, or one of the strings used for non-finite values."""
    if deserializer.peek_char() == '"':
        name = decode_string(deserializer)
        value = _NON_FINITE_NAMES.get(name.lower())
        if value is None:
            raise ValueError(f'not a number: {name!r}')
        return value
    token, _ = _read_number_token(deserializer)
    return float(token)
