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
from typing import TYPE_CHECKING, Optional, TextIO, final

from .exceptions import TooLongError

if TYPE_CHECKING:
    from .str_serializer import StrSerializer
    from .stream_serializer import StreamSerializer


class Serializer(ABC):
    """A character sink, the output of the encoder.

    The sink is owned by the caller: a serializer never closes or releases what backs it.
    """

    @staticmethod
    def build_str_serializer(capacity: Optional[int] = None) -> StrSerializer:
        from .str_serializer import StrSerializer
        return StrSerializer(capacity)

    @staticmethod
    def build_stream_serializer(stream: TextIO) -> StreamSerializer:
        from .stream_serializer import StreamSerializer
        return StreamSerializer(stream)

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of characters written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_char(self, char: str) -> None:
        """Write a single character."""
        raise NotImplementedError

    @abstractmethod
    def _write_text(self, text: str) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for char in text:
            self.write_char(char)

    @final
    def write_text(self, text: str, *, max_length: Optional[int] = None) -> None:
        """Write a sequence of characters.

        When `max_length` is given, writes longer than it are refused with a `TooLongError` and nothing is written.
        """
        if max_length is not None and len(text) > max_length:
            raise TooLongError('text is too long')
        if text:
            self._write_text(text)

    def write_newline(self) -> None:
        self.write_char('\n')

    def write_spaces(self, count: int) -> None:
        if count > 0:
            self._write_text(' ' * count)
