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
This module classifies the next JSON token by looking at its first character, without consuming it.

>>> peek_token(Deserializer.build_str_deserializer('  [1]'))
<Token.ARRAY: 'array'>
>>> peek_token(Deserializer.build_str_deserializer('-1'))
<Token.NUMBER: 'number'>
"""

from enum import Enum, unique

from typedjson.serialization import Deserializer
from typedjson.serialization.exceptions import BadDataError


@unique
class Token(Enum):
    OBJECT = 'object'
    ARRAY = 'array'
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    NULL = 'null'


_FIRST_CHARS: dict[str, Token] = {
    '{': Token.OBJECT,
    '[': Token.ARRAY,
    '"': Token.STRING,
    '-': Token.NUMBER,
    't': Token.BOOLEAN,
    'f': Token.BOOLEAN,
    'n': Token.NULL,
    **{digit: Token.NUMBER for digit in '0123456789'},
}


def peek_token(deserializer: Deserializer) -> Token:
    """Skip whitespace and return the kind of the next token, raises `OutOfDataError` at the end of the input."""
    deserializer.skip_whitespace()
    char = deserializer.peek_char()
    token = _FIRST_CHARS.get(char)
    if token is None:
        raise BadDataError(f'unexpected character {char!r}')
    return token


def expect_char(deserializer: Deserializer, char: str) -> None:
    """Skip whitespace and consume `char`, which must be the next character."""
    deserializer.skip_whitespace()
    found = deserializer.read_char()
    if found != char:
        raise BadDataError(f'expected {char!r}, got {found!r}')


def accept_char(deserializer: Deserializer, char: str) -> bool:
    """Skip whitespace and consume `char` if it is the next character."""
    deserializer.skip_whitespace()
    if not deserializer.is_empty() and deserializer.peek_char() == char:
        deserializer.read_char()
        return True
    return False
