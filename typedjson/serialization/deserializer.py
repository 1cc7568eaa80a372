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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Union, final

from .consts import JSON_WHITESPACE

if TYPE_CHECKING:
    from .str_deserializer import StrDeserializer


class Deserializer(ABC):
    """A character source, the input of the decoder."""

    @staticmethod
    def build_str_deserializer(data: Union[str, bytes, bytearray, memoryview],
                               length: Optional[int] = None) -> StrDeserializer:
        from .str_deserializer import StrDeserializer
        return StrDeserializer(data, length)

    @abstractmethod
    def finalize(self) -> None:
        """Check that the whole input was consumed, raises `TrailingDataError` otherwise."""
        raise NotImplementedError

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of characters consumed so far."""
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_char(self) -> str:
        """Read a single character but don't consume it, raises `OutOfDataError` at the end of the input."""
        raise NotImplementedError

    @abstractmethod
    def read_char(self) -> str:
        """Read a single character, raises `OutOfDataError` at the end of the input."""
        raise NotImplementedError

    @abstractmethod
    def _read_text(self, n: int) -> str:
        # XXX: it is recommended that implementors of Deserializer specialize this implementation
        return ''.join(self.read_char() for _ in range(n))

    @final
    def read_text(self, n: int) -> str:
        """Read exactly n characters, errors if there isn't enough data."""
        if n < 0:
            raise ValueError('value cannot be negative')
        return self._read_text(n)

    def read_until(self, stop_chars: str) -> str:
        """Read characters up to, not including, the first one in `stop_chars` or the end of the input."""
        # XXX: it is recommended that implementors of Deserializer specialize this implementation
        chars = []
        while not self.is_empty() and self.peek_char() not in stop_chars:
            chars.append(self.read_char())
        return ''.join(chars)

    def read_while(self, accept_chars: str) -> str:
        """Read characters as long as they are in `accept_chars`."""
        chars = []
        while not self.is_empty() and self.peek_char() in accept_chars:
            chars.append(self.read_char())
        return ''.join(chars)

    def skip_whitespace(self) -> None:
        self.read_while(JSON_WHITESPACE)

    def context(self, width: int = 20) -> str:
        """A short excerpt of the input around the current position, used in error messages."""
        return ''
