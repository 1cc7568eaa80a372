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

import re
from functools import cache
from typing import Optional, Union

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import BadDataError, OutOfDataError, TrailingDataError


@cache
def _stop_pattern(stop_chars: str) -> re.Pattern[str]:
    return re.compile(f'[{re.escape(stop_chars)}]')


class StrDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse values from a string.

    `bytes` input is decoded as UTF-8 first, and `length` limits the input to its first `length` characters (or bytes,
    for `bytes` input), which is how a caller hands over a buffer that is only partially filled.

    >>> de = StrDeserializer(b'[1, 2] xyz', 6)
    >>> de.read_until(',')
    '[1'
    >>> de.read_text(4)
    ', 2]'
    >>> de.is_empty()
    True
    """

    def __init__(self, data: Union[str, bytes, bytearray, memoryview], length: Optional[int] = None) -> None:
        if length is not None:
            if length < 0 or length > len(data):
                raise BadDataError(f'invalid length {length} for input of length {len(data)}')
            data = data[:length]
        if not isinstance(data, str):
            try:
                data = bytes(data).decode('utf-8')
            except UnicodeDecodeError as e:
                raise BadDataError(f'input is not valid UTF-8: {e.reason} at byte {e.start}') from e
        self._text: str = data
        self._pos: int = 0

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise TrailingDataError(f'trailing data at position {self._pos}: {self.context()!r}')

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def is_empty(self) -> bool:
        return self._pos >= len(self._text)

    @override
    def peek_char(self) -> str:
        if self._pos >= len(self._text):
            raise OutOfDataError('unexpected end of input')
        return self._text[self._pos]

    @override
    def read_char(self) -> str:
        char = self.peek_char()
        self._pos += 1
        return char

    @override
    def _read_text(self, n: int) -> str:
        end = self._pos + n
        if end > len(self._text):
            raise OutOfDataError('unexpected end of input')
        text = self._text[self._pos:end]
        self._pos = end
        return text

    @override
    def read_until(self, stop_chars: str) -> str:
        if not stop_chars:
            return self._read_text(len(self._text) - self._pos)
        match = _stop_pattern(stop_chars).search(self._text, self._pos)
        end = match.start() if match is not None else len(self._text)
        text = self._text[self._pos:end]
        self._pos = end
        return text

    @override
    def context(self, width: int = 20) -> str:
        return self._text[self._pos:self._pos + width]
