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

from typing import Any

from structlog import BoundLogger


class MessageLog:
    """ Diagnostics of the most recent encode or decode call.

    Each message is kept as one human-readable line and also sent to structlog as an event with the given context, so
    it can be read back with `messages()` by the caller and shows up in the application logs.
    """

    __slots__ = ('log', '_lines')

    def __init__(self, log: BoundLogger) -> None:
        self.log = log
        self._lines: list[str] = []

    def clear(self) -> None:
        self._lines.clear()

    def messages(self) -> str:
        """All the lines recorded since the last `clear`, each one terminated by a newline."""
        return ''.join(f'{line}\n' for line in self._lines)

    def warning(self, line: str, event: str, **kwargs: Any) -> None:
        """Record an anomaly that does not fail the call."""
        self._lines.append(line)
        self.log.warning(event, **kwargs)

    def error(self, line: str, event: str, **kwargs: Any) -> None:
        """Record the explanation of a failure, right before it is raised."""
        self._lines.append(line)
        self.log.error(event, **kwargs)
