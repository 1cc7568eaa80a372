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

from typing import Optional

from typing_extensions import override

from .exceptions import TooLongError
from .serializer import Serializer


class StrSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    This implementation defers joining everything until finalize is called, before that every write is stored in a
    list. An optional capacity bounds the total length, a write that would go past it fails with `TooLongError`
    without writing anything.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError('capacity cannot be negative')
        self._parts: list[str] = []
        self._pos: int = 0
        self._capacity = capacity

    def finalize(self) -> str:
        """Get the resulting text."""
        text = ''.join(self._parts)
        self._parts = [text]
        return text

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def _reserve(self, length: int) -> None:
        if self._capacity is not None and self._pos + length > self._capacity:
            raise TooLongError(f'capacity of {self._capacity} characters exceeded')

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_char(self, char: str) -> None:
        assert len(char) == 1
        self._reserve(1)
        self._parts.append(char)
        self._pos += 1

    @override
    def _write_text(self, text: str) -> None:
        self._reserve(len(text))
        self._parts.append(text)
        self._pos += len(text)
