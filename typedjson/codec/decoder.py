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
The decoder populates a target value from JSON text, driven by the target's category.

Instead of parsing into a generic tree first, the decoder looks at the category of the value it has to populate and
only accepts the tokens that category can be populated from. Containers are populated in place, scalars are replaced,
and in both cases the populated value is returned so that the parent can store it.

>>> from dataclasses import dataclass
>>> from typedjson.model import SequenceValue
>>> @dataclass
... class Point(SequenceValue):
...     x: int = 0
...     y: int = 0
>>> decoder = Decoder()
>>> decoder.decode('{"x": 1, "z": true, "y": 2}', Point())
Point(x=1, y=2)
>>> print(decoder.logged_messages(), end='')
Skipping unknown element named: 'z'.
"""

from typing import Any, Optional, TypeVar, Union

from structlog import get_logger

from typedjson.codec.log import MessageLog
from typedjson.codec.options import DecoderOptions
from typedjson.exception import (
    DecodeError,
    InvalidDateTimeFormat,
    JsonSyntaxError,
    MissingRequiredAttribute,
    RecursionLimitExceeded,
    SchemaViolation,
    TypeMismatch,
    ValidationFailure,
)
from typedjson.iso8601 import is_calendar_value, parse
from typedjson.model import Category, ChoiceValue, FormattingMode, SimpleValue, is_byte_array, select_category
from typedjson.model.enumeration import from_int, from_string
from typedjson.model.formatting_mode import is_untagged, type_hint
from typedjson.serialization import BadDataError, Deserializer, SerializationError
from typedjson.serialization.encoding.base64 import base64_to_bytes
from typedjson.serialization.encoding.literal import decode_bool, decode_null
from typedjson.serialization.encoding.number import decode_float, decode_int, decode_number
from typedjson.serialization.encoding.string import decode_string
from typedjson.serialization.encoding.token import Token, accept_char, expect_char, peek_token

logger = get_logger()

T = TypeVar('T')

Source = Union[Deserializer, str, bytes, bytearray, memoryview]


class Decoder:
    """ Decodes JSON text into values of any category.

    A decoder can be reused for any number of calls, but not concurrently. Each call starts by clearing the
    diagnostics of the previous one, see `logged_messages`.
    """

    def __init__(self) -> None:
        self.log = logger.new()
        self._messages = MessageLog(self.log)

    def logged_messages(self) -> str:
        """Diagnostics of the most recent call, one line per message."""
        return self._messages.messages()

    def decode(self, source: Source, target: T, options: Optional[DecoderOptions] = None, *,
               length: Optional[int] = None) -> T:
        """ Populate `target` from the JSON document in `source` and return the populated value.

        `source` is a deserializer or the text itself, either as `str` or as UTF-8 encoded bytes, of which only the
        first `length` items are used when `length` is given. The whole input must be one JSON document, only
        whitespace can follow it.

        Raises a `DecodeError` on failure, in which case `target` may be partially populated.
        """
        self._messages.clear()
        if options is None:
            options = DecoderOptions()
        if isinstance(source, Deserializer):
            deserializer = source
        else:
            try:
                deserializer = Deserializer.build_str_deserializer(source, length)
            except BadDataError as e:
                self._messages.error(f'Unable to read the input: {e}.', 'invalid input', error=str(e))
                raise JsonSyntaxError(str(e)) from e
        impl = _DecodeImpl(deserializer, options, self._messages)
        try:
            result = impl.decode(target, FormattingMode.DEFAULT, 0)
            deserializer.skip_whitespace()
            deserializer.finalize()
        except SerializationError as e:
            position = deserializer.cur_pos()
            self._messages.error(f'Syntax error at position {position}: {e}.', 'json syntax error',
                                 position=position, error=str(e))
            raise JsonSyntaxError(f'{e} at position {position}') from e
        self.log.debug('value decoded', target_type=type(target).__name__, length=deserializer.cur_pos())
        return result


class _DecodeImpl:
    """State of a single decode call."""

    def __init__(self, deserializer: Deserializer, options: DecoderOptions, messages: MessageLog) -> None:
        self.deserializer = deserializer
        self.options = options
        self.messages = messages

    def _where(self) -> str:
        return f'at position {self.deserializer.cur_pos()}'

    def _select(self, target: Any) -> Category:
        try:
            return select_category(target)
        except TypeError as e:
            self.messages.error(f'Unable to decode into a value of type {type(target).__name__}.',
                                'unsupported target', target_type=type(target).__name__)
            raise TypeMismatch(str(e)) from e

    def _check_depth(self, depth: int) -> None:
        if depth > self.options.max_depth:
            self.messages.error(f'Maximum depth of {self.options.max_depth} exceeded {self._where()}.',
                                'recursion limit exceeded', max_depth=self.options.max_depth)
            raise RecursionLimitExceeded(f'maximum depth of {self.options.max_depth} exceeded {self._where()}')

    def _expect_token(self, *expected: Token) -> Token:
        token = peek_token(self.deserializer)
        if token not in expected:
            names = ' or '.join(item.value for item in expected)
            raise TypeMismatch(f'expected {names}, got {token.value} {self._where()}')
        return token

    def decode(self, target: Any, mode: int, depth: int) -> Any:
        self._check_depth(depth)
        category = self._select(target)
        match category:
            case Category.SIMPLE:
                return self._decode_simple(target)
            case Category.ARRAY:
                return self._decode_array(target, mode, depth)
            case Category.SEQUENCE:
                return self._decode_sequence(target, depth)
            case Category.CHOICE:
                return self._decode_choice(target, depth)
            case Category.ENUMERATION:
                return self._decode_enumeration(target)
            case Category.NULLABLE_VALUE:
                if peek_token(self.deserializer) is Token.NULL:
                    decode_null(self.deserializer)
                    target.reset()
                else:
                    target.make_value()
                    target.set_value(self.decode(target.value(), mode, depth + 1))
                return target
            case Category.CUSTOMIZED_TYPE:
                return self._decode_customized(target, mode, depth)
            case Category.DYNAMIC_TYPE:
                target.assign(self.decode(target.resolve(), mode, depth + 1))
                return target
            case _:
                raise AssertionError(f'unhandled category {category}')

    def _decode_simple(self, target: Any) -> Any:
        if not isinstance(target, SimpleValue):
            return self._decode_scalar(target)
        raw = self._decode_scalar(target.get())
        try:
            return type(target).set(raw)
        except ValueError as e:
            raise TypeMismatch(f'{type(target).__name__}: {e} {self._where()}') from e

    def _decode_scalar(self, prototype: Any) -> Any:
        de = self.deserializer
        try:
            match prototype:
                case bool():
                    self._expect_token(Token.BOOLEAN)
                    return decode_bool(de)
                case int():
                    self._expect_token(Token.NUMBER)
                    return decode_int(de)
                case float():
                    self._expect_token(Token.NUMBER, Token.STRING)
                    return decode_float(de)
                case str():
                    self._expect_token(Token.STRING)
                    return decode_string(de)
                case _ if is_calendar_value(prototype):
                    self._expect_token(Token.STRING)
                    return self._parse_calendar(type(prototype), decode_string(de))
                case _:
                    raise TypeMismatch(f'unsupported scalar of type {type(prototype).__name__}')
        except ValueError as e:
            # raised for well-formed tokens that don't fit, e.g. 1.5 for an int
            if isinstance(e, DecodeError):
                raise
            raise TypeMismatch(f'{e} {self._where()}') from e

    def _parse_calendar(self, type_: type, text: str) -> Any:
        try:
            return parse(type_, text, advance_midnight=self.options.advance_midnight_to_next_day)
        except InvalidDateTimeFormat as e:
            self.messages.error(f'Unable to parse {text!r} as {type_.__name__}: {e}.', 'invalid date/time',
                                text=text, target_type=type_.__name__)
            raise

    def _decode_bytes(self, target: Any) -> Any:
        token = self._expect_token(Token.STRING, Token.ARRAY)
        if token is Token.STRING:
            try:
                data = base64_to_bytes(decode_string(self.deserializer))
            except ValueError as e:
                raise TypeMismatch(f'{e} {self._where()}') from e
        else:
            data = bytes(self._decode_byte_list())
        if isinstance(target, bytearray):
            target[:] = data
            return target
        return type(target)(data)

    def _decode_byte_list(self) -> list[int]:
        de = self.deserializer
        expect_char(de, '[')
        values: list[int] = []
        if accept_char(de, ']'):
            return values
        while True:
            self._expect_token(Token.NUMBER)
            value = decode_number(de)
            if not isinstance(value, int) or not 0 <= value < 256:
                raise TypeMismatch(f'not a byte: {value} {self._where()}')
            values.append(value)
            if not accept_char(de, ','):
                break
        expect_char(de, ']')
        return values

    def _decode_array(self, target: Any, mode: int, depth: int) -> Any:
        if is_byte_array(target):
            return self._decode_bytes(target)
        if not hasattr(target, 'append_element'):
            raise TypeMismatch(f'cannot decode into a {type(target).__name__}, use an ArrayValue')
        de = self.deserializer
        token = self._expect_token(Token.ARRAY, Token.STRING) if type_hint(mode) == FormattingMode.BASE64 \
            else self._expect_token(Token.ARRAY)
        target.resize(0)
        if token is Token.STRING:
            for byte in self._decode_bytes(b''):
                target.set_element(target.append_element(), byte)
            return target
        expect_char(de, '[')
        if accept_char(de, ']'):
            return target
        element_mode = mode & ~FormattingMode.UNTAGGED
        while True:
            index = target.append_element()
            target.set_element(index, self.decode(target.access_element(index), element_mode, depth + 1))
            if not accept_char(de, ','):
                break
        expect_char(de, ']')
        return target

    def _decode_element(self, value: Any, info: Any, depth: int) -> Any:
        """Decode the value of one object member, `info` is an attribute or selection info."""
        try:
            return self.decode(value, info.formatting_mode, depth)
        except (DecodeError, SerializationError):
            self.messages.error(f"Unable to decode value of element named: '{info.name}'.", 'element not decoded',
                                name=info.name)
            raise

    def _decode_member(self, target: Any, name: str, depth: int, seen: dict[int, set[int]]) -> bool:
        """Decode the value for key `name` into `target`, returns False if no attribute matches it.

        Attributes of untagged sequences and selections of untagged choices are looked up as if they were attributes
        of `target`. The ids of the decoded attributes are added to `seen`, under the `id()` of the sequence that owns
        them.
        """
        info = target.lookup_attribute_info(name)
        if info is not None:
            seen.setdefault(id(target), set()).add(info.id)
            target.set_attribute(info, self._decode_element(target.access_attribute(info), info, depth + 1))
            return True
        for attribute, info in target.access_attributes():
            if not is_untagged(info.formatting_mode):
                continue
            category = self._select(attribute)
            if category is Category.SEQUENCE:
                if self._decode_member(attribute, name, depth + 1, seen):
                    return True
            elif category is Category.CHOICE:
                selection_info = attribute.lookup_selection_info(name)
                if selection_info is not None:
                    attribute.make_selection(selection_info.id)
                    selection = self._decode_element(attribute.access_selection(), selection_info, depth + 1)
                    attribute.set_selection(selection)
                    return True
        return False

    def _skip_unknown(self, target: Any, name: str, depth: int) -> None:
        if not self.options.skip_unknown_elements:
            self.messages.error(f"Unknown element named: '{name}'.", 'unknown element', name=name,
                                target_type=type(target).__name__)
            raise SchemaViolation(f'{type(target).__name__} has no attribute named {name!r} {self._where()}')
        self.messages.warning(f"Skipping unknown element named: '{name}'.", 'unknown element skipped', name=name,
                              target_type=type(target).__name__)
        self._skip_value(depth + 1)

    def _skip_value(self, depth: int) -> None:
        """Consume any JSON value."""
        self._check_depth(depth)
        de = self.deserializer
        match peek_token(de):
            case Token.OBJECT:
                expect_char(de, '{')
                if accept_char(de, '}'):
                    return
                while True:
                    self._read_key()
                    self._skip_value(depth + 1)
                    if not accept_char(de, ','):
                        break
                expect_char(de, '}')
            case Token.ARRAY:
                expect_char(de, '[')
                if accept_char(de, ']'):
                    return
                while True:
                    self._skip_value(depth + 1)
                    if not accept_char(de, ','):
                        break
                expect_char(de, ']')
            case Token.STRING:
                decode_string(de)
            case Token.NUMBER:
                decode_number(de)
            case Token.BOOLEAN:
                decode_bool(de)
            case Token.NULL:
                decode_null(de)

    def _read_key(self) -> str:
        """Read an object key and the colon that follows it."""
        de = self.deserializer
        de.skip_whitespace()
        if de.peek_char() != '"':
            raise BadDataError(f'expected an object key, got {de.peek_char()!r}')
        name = decode_string(de)
        expect_char(de, ':')
        return name

    def _decode_sequence(self, target: Any, depth: int) -> Any:
        de = self.deserializer
        self._expect_token(Token.OBJECT)
        expect_char(de, '{')
        seen: dict[int, set[int]] = {}
        if not accept_char(de, '}'):
            while True:
                name = self._read_key()
                if not self._decode_member(target, name, depth, seen):
                    self._skip_unknown(target, name, depth)
                if not accept_char(de, ','):
                    break
            expect_char(de, '}')
        self._check_required(target, seen)
        return target

    def _check_required(self, target: Any, seen: dict[int, set[int]]) -> None:
        """Raise if a required attribute of `target`, or of an untagged sequence inlined into it, was not decoded."""
        present = seen.get(id(target), set())
        missing = [info.name for info in target.attribute_infos()
                   if target.is_required(info) and info.id not in present]
        if missing:
            names = ', '.join(repr(name) for name in missing)
            self.messages.error(f'Missing required elements: {names}.', 'missing required attribute',
                                names=missing, target_type=type(target).__name__)
            raise MissingRequiredAttribute(f'{type(target).__name__} requires {names} {self._where()}')
        for attribute, info in target.access_attributes():
            if is_untagged(info.formatting_mode) and self._select(attribute) is Category.SEQUENCE:
                self._check_required(attribute, seen)

    def _decode_choice(self, target: Any, depth: int) -> Any:
        de = self.deserializer
        self._expect_token(Token.OBJECT)
        expect_char(de, '{')
        if accept_char(de, '}'):
            target.make_selection(ChoiceValue.UNDEFINED_SELECTION_ID)
            return target
        name = self._read_key()
        info = target.lookup_selection_info(name)
        if info is None:
            self.messages.error(f"Unknown selection named: '{name}'.", 'unknown selection', name=name,
                                target_type=type(target).__name__)
            raise SchemaViolation(f'{type(target).__name__} has no selection named {name!r} {self._where()}')
        target.make_selection(info.id)
        target.set_selection(self._decode_element(target.access_selection(), info, depth + 1))
        if accept_char(de, ','):
            raise SchemaViolation(f'{type(target).__name__} object must have a single selection {self._where()}')
        expect_char(de, '}')
        return target

    def _decode_enumeration(self, target: Any) -> Any:
        de = self.deserializer
        token = self._expect_token(Token.STRING, Token.NUMBER)
        try:
            if token is Token.STRING:
                return from_string(target, decode_string(de))
            try:
                number = decode_int(de)
            except ValueError as e:
                raise TypeMismatch(f'{e} {self._where()}') from e
            return from_int(target, number)
        except ValueError as e:
            self.messages.error(f'Unable to decode enumerator: {e}.', 'unknown enumerator',
                                target_type=type(target).__name__)
            raise SchemaViolation(f'{e} {self._where()}') from e

    def _decode_customized(self, target: Any, mode: int, depth: int) -> Any:
        base = self.decode(target.base_prototype(), mode, depth + 1)
        try:
            return type(target).from_base(base)
        except ValueError as e:
            self.messages.error(f'Unable to convert {base!r} to {type(target).__name__}: {e}.', 'validation failure',
                                target_type=type(target).__name__)
            raise ValidationFailure(f'{type(target).__name__}: {e} {self._where()}') from e
