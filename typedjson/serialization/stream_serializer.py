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

from typing import TextIO

from typing_extensions import override

from .serializer import Serializer


class StreamSerializer(Serializer):
    """Serializer that writes straight to a text stream, which is neither flushed nor closed."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pos: int = 0

    @property
    def stream(self) -> TextIO:
        return self._stream

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_char(self, char: str) -> None:
        assert len(char) == 1
        self._stream.write(char)
        self._pos += 1

    @override
    def _write_text(self, text: str) -> None:
        self._stream.write(text)
        self._pos += len(text)
