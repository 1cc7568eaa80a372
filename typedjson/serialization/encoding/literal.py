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
This module implements the JSON literals `true`, `false` and `null`.

>>> se = Serializer.build_str_serializer()
>>> encode_bool(se, True)
>>> encode_null(se)
>>> se.finalize()
'truenull'

>>> de = Deserializer.build_str_deserializer('false null')
>>> decode_bool(de)
False
>>> de.skip_whitespace()
>>> decode_null(de)
>>> de.finalize()
"""

from typedjson.serialization import Deserializer, Serializer
from typedjson.serialization.exceptions import BadDataError

_LITERAL_CHARS = 'abcdefghijklmnopqrstuvwxyz'


def _read_literal(deserializer: Deserializer) -> str:
    literal = deserializer.read_while(_LITERAL_CHARS)
    if literal not in ('true', 'false', 'null'):
        raise BadDataError(f'invalid literal {literal!r}')
    return literal


def encode_bool(serializer: Serializer, value: bool) -> None:
    assert isinstance(value, bool)
    serializer.write_text('true' if value else 'false')


def encode_null(serializer: Serializer) -> None:
    serializer.write_text('null')


def decode_bool(deserializer: Deserializer) -> bool:
    """Read `true` or `false`, raises ValueError on a well-formed `null`."""
    literal = _read_literal(deserializer)
    if literal == 'null':
        raise ValueError('expected a boolean, got null')
    return literal == 'true'


def decode_null(deserializer: Deserializer) -> None:
    """Read `null`, raises ValueError on a well-formed boolean."""
    literal = _read_literal(deserializer)
    if literal != 'null':
        raise ValueError(f'expected null, got {literal}')
