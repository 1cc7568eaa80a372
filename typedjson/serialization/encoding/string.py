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

r"""
This module implements JSON string tokens: quotes around the text, with `"`, `\` and control characters escaped.

Encoding only escapes what it must, everything else (non-ASCII included) is written as-is. Decoding accepts every
escape of RFC 8259, `\uXXXX` surrogate pairs included.

>>> se = Serializer.build_str_serializer()
>>> encode_string(se, 'say "hi"\n')
>>> encode_string(se, 'tab\there \x01')
>>> se.finalize()
'"say \\"hi\\"\\n""tab\\there \\u0001"'

>>> de = Deserializer.build_str_deserializer(r'"café 😎 \/"')
>>> decode_string(de)
'café 😎 /'
>>> de.finalize()

>>> decode_string(Deserializer.build_str_deserializer('"unterminated'))
Traceback (most recent call last):
...
typedjson.serialization.exceptions.OutOfDataError: unexpected end of input
"""

import re

from typedjson.serialization import Deserializer, Serializer
from typedjson.serialization.exceptions import BadDataError

_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}

_UNESCAPES = {
    '"': '"',
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

_CONTROL_CHARS = ''.join(chr(i) for i in range(0x20))
_STOP_CHARS = '"\\' + _CONTROL_CHARS
_NEEDS_ESCAPE = re.compile(r'["\\\x00-\x1f]')
_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def _escape_char(match: re.Match[str]) -> str:
    char = match.group()
    return _ESCAPES.get(char) or f'\\u{ord(char):04x}'


def escape_string(value: str) -> str:
    """Escape `value` to be placed between quotes, without adding the quotes."""
    return _NEEDS_ESCAPE.sub(_escape_char, value)


def encode_string(serializer: Serializer, value: str) -> None:
    """ Encodes a string as a quoted JSON string.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    serializer.write_char('"')
    serializer.write_text(escape_string(value))
    serializer.write_char('"')


def _read_hex4(deserializer: Deserializer) -> int:
    digits = deserializer.read_text(4)
    if not _HEX_DIGITS.issuperset(digits):
        raise BadDataError(f'invalid unicode escape \\u{digits}')
    return int(digits, 16)


def _read_escape(deserializer: Deserializer) -> str:
    """Read what follows a backslash."""
    char = deserializer.read_char()
    unescaped = _UNESCAPES.get(char)
    if unescaped is not None:
        return unescaped
    if char != 'u':
        raise BadDataError(f'invalid escape sequence \\{char}')
    code = _read_hex4(deserializer)
    if not 0xD800 <= code < 0xDC00:
        return chr(code)
    # high surrogate, combine it with a following low surrogate
    if deserializer.is_empty() or deserializer.peek_char() != '\\':
        return chr(code)
    deserializer.read_char()
    following = _read_escape(deserializer)
    if len(following) == 1 and 0xDC00 <= ord(following) < 0xE000:
        return chr(0x10000 + ((code - 0xD800) << 10) + (ord(following) - 0xDC00))
    return chr(code) + following


def decode_string(deserializer: Deserializer) -> str:
    """ Decodes a quoted JSON string.

    This modules's docstring has more details and examples.
    """
    char = deserializer.read_char()
    if char != '"':
        raise BadDataError(f'expected a string, got {char!r}')
    parts = []
    while True:
        parts.append(deserializer.read_until(_STOP_CHARS))
        char = deserializer.read_char()
        if char == '"':
            break
        if char == '\\':
            parts.append(_read_escape(deserializer))
        else:
            raise BadDataError(f'unescaped control character {char!r} in string')
    return ''.join(parts)
