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


class SerializationError(Exception):
    pass


class OutOfDataError(SerializationError):
    """Raised when a source ends before a complete token could be read."""
    pass


class TooLongError(SerializationError):
    """Raised when a write would exceed the capacity of a bounded sink."""
    pass


class TrailingDataError(SerializationError):
    """Raised by `finalize` when a source still has unread data."""
    pass


class BadDataError(SerializationError):
    """Raised when the data read is not a valid token."""
    pass
