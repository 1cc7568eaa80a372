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
This module contains the exceptions raised by the codec.

Every failure is reported synchronously as a single exception from the top-level `encode`/`decode` call. There is no
rollback: when one of these is raised mid-traversal, whatever was already written to the output sink, or already
assigned to the target value, is left as-is and should be discarded by the caller.

Non-fatal anomalies (unknown object keys while decoding, enumerators without a name while encoding) are never raised,
they are recorded in the engine's message log instead.
"""


class TypedJsonError(Exception):
    """Base class for all errors raised by this package."""
    pass


class EncodeError(TypedJsonError):
    """Raised when a value cannot be encoded."""
    pass


class UnsupportedValueError(EncodeError, TypeError):
    """Raised when a value does not belong to any category, or does not fit its formatting mode."""
    pass


class InvalidElementNameError(EncodeError):
    """Raised when an attribute or selection name cannot be written as a JSON object key."""
    pass


class DecodeError(TypedJsonError):
    """Raised when a text cannot be decoded into the target value."""
    pass


class JsonSyntaxError(DecodeError):
    """Raised on malformed JSON text: unterminated strings, bad escapes, missing separators or trailing data."""
    pass


class TypeMismatch(DecodeError):
    """Raised when a token is well-formed but is not of the kind the target's category expects."""
    pass


class SchemaViolation(DecodeError):
    """Raised on names that the schema does not know: choice selections, enumerators or (in strict mode) keys."""
    pass


class MissingRequiredAttribute(SchemaViolation):
    """Raised when an object does not have a key for an attribute that the schema marks as required."""
    pass


class InvalidDateTimeFormat(DecodeError, ValueError):
    """Raised when an ISO 8601 string does not follow the grammar or is out of the representable range."""
    pass


class InvalidZoneForMidnight(InvalidDateTimeFormat):
    """Raised when the time 24:00 is paired with a zone designator that is not UTC."""
    pass


class InvalidDateForMidnight(InvalidDateTimeFormat):
    """Raised when the time 24:00 is paired with a date other than the default date."""
    pass


class ValidationFailure(DecodeError):
    """Raised when a customized type rejects the base value that was decoded for it."""
    pass


class RecursionLimitExceeded(EncodeError, DecodeError):
    """Raised when nesting goes deeper than the configured maximum depth."""
    pass
