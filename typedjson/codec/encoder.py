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
The encoder walks a value by category and writes JSON text to a serializer.

>>> from dataclasses import dataclass, field
>>> from typedjson.model import NullableValue, SequenceValue
>>> @dataclass
... class Point(SequenceValue):
...     x: int = 0
...     y: int = 0
...     label: NullableValue[str] = field(default_factory=lambda: NullableValue(str))
>>> encoder = Encoder()
>>> encoder.encode_to_string(Point(1, 2))
'{"x":1,"y":2}'
>>> encoder.encode_to_string([Point(), Point(3, 4, NullableValue(str, 'far'))])
'[{"x":0,"y":0},{"x":3,"y":4,"label":"far"}]'
"""

from typing import Any, Optional, TextIO, Union

from structlog import get_logger
from typing_extensions import assert_never

from typedjson.codec.formatter import Formatter
from typedjson.codec.log import MessageLog
from typedjson.codec.options import EncoderOptions
from typedjson.exception import EncodeError, InvalidElementNameError, RecursionLimitExceeded, UnsupportedValueError
from typedjson.iso8601 import generate, is_calendar_value
from typedjson.model import AttributeInfo, Category, FormattingMode, SimpleValue, is_byte_array, select_category
from typedjson.model.enumeration import to_int, to_string
from typedjson.model.formatting_mode import is_nillable, is_untagged, type_hint
from typedjson.serialization import SerializationError, Serializer
from typedjson.serialization.encoding.base64 import encode_base64
from typedjson.serialization.encoding.literal import encode_bool, encode_null
from typedjson.serialization.encoding.number import encode_float, encode_int
from typedjson.serialization.encoding.string import encode_string

logger = get_logger()


class Encoder:
    """ Encodes values of any category as JSON.

    An encoder can be reused for any number of calls, but not concurrently. Each call starts by clearing the
    diagnostics of the previous one, see `logged_messages`.
    """

    def __init__(self) -> None:
        self.log = logger.new()
        self._messages = MessageLog(self.log)

    def logged_messages(self) -> str:
        """Diagnostics of the most recent call, one line per message."""
        return self._messages.messages()

    def encode(self, sink: Union[Serializer, TextIO], value: Any, options: Optional[EncoderOptions] = None) -> None:
        """ Write `value` as a JSON document to `sink`, which can be a serializer or a text stream.

        Raises an `EncodeError` on failure, in which case `sink` may hold a partial document.
        """
        self._messages.clear()
        if options is None:
            options = EncoderOptions()
        serializer = sink if isinstance(sink, Serializer) else Serializer.build_stream_serializer(sink)
        impl = _EncodeImpl(serializer, options, self._messages)
        try:
            impl.formatter.open_document()
            impl.encode(value, FormattingMode.DEFAULT, 0)
            impl.formatter.close_document()
        except SerializationError as e:
            self._messages.error(f'Unable to write the output: {e}.', 'output error', error=str(e))
            raise EncodeError(str(e)) from e
        self.log.debug('value encoded', value_type=type(value).__name__, length=serializer.cur_pos())

    def encode_to_string(self, value: Any, options: Optional[EncoderOptions] = None) -> str:
        """Shortcut to encode a value into a new string."""
        serializer = Serializer.build_str_serializer()
        self.encode(serializer, value, options)
        return serializer.finalize()


class _Members:
    """Writes the separators between the members of one JSON object, which untagged attributes share."""

    __slots__ = ('_formatter', '_first')

    def __init__(self, formatter: Formatter) -> None:
        self._formatter = formatter
        self._first = True

    def next(self) -> None:
        if not self._first:
            self._formatter.close_element()
        self._first = False


class _EncodeImpl:
    """State of a single encode call."""

    def __init__(self, serializer: Serializer, options: EncoderOptions, messages: MessageLog) -> None:
        self.serializer = serializer
        self.options = options
        self.messages = messages
        self.formatter = Formatter(serializer, options)
        self.iso8601_configuration = options.iso8601_configuration()

    def _select(self, value: Any) -> Category:
        try:
            return select_category(value)
        except TypeError as e:
            self.messages.error(f'Unable to encode value of type {type(value).__name__}.', 'unsupported value',
                                value_type=type(value).__name__)
            raise UnsupportedValueError(str(e)) from e

    def _check_depth(self, depth: int) -> None:
        if depth > self.options.max_depth:
            self.messages.error(f'Maximum depth of {self.options.max_depth} exceeded.', 'recursion limit exceeded',
                                max_depth=self.options.max_depth)
            raise RecursionLimitExceeded(f'maximum depth of {self.options.max_depth} exceeded')

    def encode(self, value: Any, mode: int, depth: int) -> None:
        self._check_depth(depth)
        category = self._select(value)
        match category:
            case Category.SIMPLE:
                self._encode_simple(value)
            case Category.ARRAY:
                self._encode_array(value, mode, depth)
            case Category.SEQUENCE:
                self._encode_sequence(value, depth)
            case Category.CHOICE:
                self._encode_choice(value, depth)
            case Category.ENUMERATION:
                self._encode_enumeration(value)
            case Category.NULLABLE_VALUE:
                if value.is_null():
                    self.formatter.indent()
                    encode_null(self.serializer)
                else:
                    self.encode(value.value(), mode, depth + 1)
            case Category.CUSTOMIZED_TYPE:
                self.encode(value.to_base(), mode, depth + 1)
            case Category.DYNAMIC_TYPE:
                self.encode(value.resolve(), mode, depth + 1)
            case _:
                assert_never(category)

    def _encode_simple(self, value: Any) -> None:
        self.formatter.indent()
        if isinstance(value, SimpleValue):
            value = value.get()
        match value:
            case bool():
                encode_bool(self.serializer, value)
            case int():
                encode_int(self.serializer, value)
            case float():
                encode_float(self.serializer, value)
            case str():
                encode_string(self.serializer, value)
            case _ if is_calendar_value(value):
                encode_string(self.serializer, generate(value, self.iso8601_configuration))
            case _:
                raise UnsupportedValueError(f'not a simple scalar: {type(value).__name__}')

    def _to_bytes(self, value: Any) -> bytes:
        try:
            return bytes(value)
        except (TypeError, ValueError) as e:
            self.messages.error('Unable to encode array as base64, elements must be integers in range(256).',
                                'invalid base64 array', value_type=type(value).__name__)
            raise UnsupportedValueError(f'cannot encode as base64: {e}') from e

    def _encode_array(self, value: Any, mode: int, depth: int) -> None:
        if is_byte_array(value) or type_hint(mode) == FormattingMode.BASE64:
            self.formatter.indent()
            encode_base64(self.serializer, self._to_bytes(value))
            return
        if len(value) == 0:
            self.formatter.open_array(empty=True)
            self.formatter.close_array(empty=True)
            return
        element_mode = mode & ~FormattingMode.UNTAGGED
        self.formatter.open_array()
        self.formatter.is_array_element = True
        for index, element in enumerate(value):
            if index:
                self.formatter.close_element()
            self.encode(element, element_mode, depth + 1)
            # nested objects clear it
            self.formatter.is_array_element = True
        self.formatter.is_array_element = False
        self.formatter.close_array()

    def _encode_sequence(self, value: Any, depth: int) -> None:
        self.formatter.open_object()
        was_array_element = self.formatter.is_array_element
        self.formatter.is_array_element = False
        self._encode_members(value, depth, _Members(self.formatter))
        self.formatter.is_array_element = was_array_element
        self.formatter.close_object()

    def _skip_attribute(self, value: Any, info: AttributeInfo) -> bool:
        category = self._select(value)
        if category is Category.NULLABLE_VALUE and value.is_null():
            return not (is_nillable(info.formatting_mode) or self.options.encode_null_elements)
        if category is Category.ARRAY and len(value) == 0:
            return not self.options.encode_empty_arrays
        return False

    def _encode_members(self, value: Any, depth: int, members: _Members) -> None:
        self._check_depth(depth)
        for attribute, info in value.access_attributes():
            if self._skip_attribute(attribute, info):
                continue
            if is_untagged(info.formatting_mode):
                category = self._select(attribute)
                if category is Category.SEQUENCE:
                    self._encode_members(attribute, depth + 1, members)
                    continue
                if category is Category.CHOICE:
                    selection_info = attribute.selection_info()
                    if selection_info is not None:
                        members.next()
                        self._encode_element(attribute.access_selection(), selection_info, depth + 1)
                    continue
            members.next()
            self._encode_element(attribute, info, depth + 1)

    def _encode_element(self, value: Any, info: Any, depth: int) -> None:
        """Write one object member, `info` is an attribute or selection info."""
        if not self.formatter.open_element(info.name):
            self.messages.error(f"Unable to encode element named: '{info.name}'.", 'invalid element name',
                                name=info.name)
            raise InvalidElementNameError(f'invalid element name: {info.name!r}')
        try:
            self.encode(value, info.formatting_mode, depth)
        except EncodeError:
            self.messages.error(f"Unable to encode value of element named: '{info.name}'.", 'element not encoded',
                                name=info.name)
            raise

    def _encode_choice(self, value: Any, depth: int) -> None:
        info = value.selection_info()
        if info is None:
            self.formatter.open_object(empty=True)
            self.formatter.close_object(empty=True)
            return
        self.formatter.open_object()
        was_array_element = self.formatter.is_array_element
        self.formatter.is_array_element = False
        self._encode_element(value.access_selection(), info, depth + 1)
        self.formatter.is_array_element = was_array_element
        self.formatter.close_object()

    def _encode_enumeration(self, value: Any) -> None:
        self.formatter.indent()
        name = to_string(value)
        if name is not None:
            encode_string(self.serializer, name)
            return
        number = to_int(value)
        self.messages.warning(f'Enumerator {number} of {type(value).__name__} has no name, encoded as an integer.',
                              'enumerator without name', enumeration=type(value).__name__, value=number)
        encode_int(self.serializer, number)
