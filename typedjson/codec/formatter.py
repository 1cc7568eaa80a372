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
The formatter decides where whitespace goes, the engines decide what tokens are written.

In the COMPACT style no whitespace is written at all. In the PRETTY style every member of an object and every element
of a non-empty array goes on its own line, indented one level deeper than the line that opened the container, and
the closing bracket goes on its own line at the indentation of the opening one. Members are written as
`"name" : value`. The document itself is indented `initial_indent_level` levels and has no trailing newline:

>>> from typedjson.serialization import Serializer
>>> se = Serializer.build_str_serializer()
>>> formatter = Formatter(se, EncoderOptions(encoding_style=EncodingStyle.PRETTY, spaces_per_level=2))
>>> formatter.open_document()
>>> formatter.open_object()
>>> formatter.open_element('a')
True
>>> se.write_text('1')
>>> formatter.close_object()
>>> formatter.close_document()
>>> print(se.finalize())
{
  "a" : 1
}
"""

from typedjson.codec.options import EncoderOptions, EncodingStyle
from typedjson.serialization import Serializer
from typedjson.serialization.encoding.string import encode_string


class Formatter:
    """ Stateful emitter of JSON structure over a serializer.

    `is_array_element` tells whether the value being written is an element of an array, in which case it needs its
    own indentation in the PRETTY style (members get theirs from `open_element`). The engines set it when entering
    an array and clear it when entering an object.
    """

    __slots__ = ('_serializer', '_pretty', '_indent_level', '_spaces_per_level', 'is_array_element')

    def __init__(self, serializer: Serializer, options: EncoderOptions) -> None:
        self._serializer = serializer
        self._pretty = options.encoding_style is EncodingStyle.PRETTY
        self._indent_level = options.initial_indent_level
        self._spaces_per_level = options.spaces_per_level
        self.is_array_element = False

    @property
    def indent_level(self) -> int:
        return self._indent_level

    def _write_indentation(self) -> None:
        self._serializer.write_spaces(self._indent_level * self._spaces_per_level)

    def open_document(self) -> None:
        if self._pretty:
            self._write_indentation()

    def close_document(self) -> None:
        # no trailing newline
        pass

    def open_object(self, empty: bool = False) -> None:
        self.indent()
        self._serializer.write_char('{')
        if self._pretty and not empty:
            self._serializer.write_newline()
        self._indent_level += 1

    def close_object(self, empty: bool = False) -> None:
        self._indent_level -= 1
        if self._pretty and not empty:
            self._serializer.write_newline()
            self._write_indentation()
        self._serializer.write_char('}')

    def open_array(self, empty: bool = False) -> None:
        """Open an array, `empty` keeps the brackets on the same line so that an empty array is always `[]`."""
        self.indent()
        self._serializer.write_char('[')
        if self._pretty and not empty:
            self._serializer.write_newline()
        self._indent_level += 1

    def close_array(self, empty: bool = False) -> None:
        self._indent_level -= 1
        if self._pretty and not empty:
            self._serializer.write_newline()
            self._write_indentation()
        self._serializer.write_char(']')

    def indent(self) -> None:
        """Write the indentation of a value that starts a line, which is only the case for array elements."""
        if self._pretty and self.is_array_element:
            self._write_indentation()

    def open_element(self, name: str) -> bool:
        """Write a member name and the separator, returns False without writing anything if `name` is not usable."""
        if not isinstance(name, str) or not _is_encodable(name):
            return False
        if self._pretty:
            self._write_indentation()
        encode_string(self._serializer, name)
        self._serializer.write_text(' : ' if self._pretty else ':')
        return True

    def close_element(self) -> None:
        """Write the separator between two members or two elements."""
        self._serializer.write_char(',')
        if self._pretty:
            self._serializer.write_newline()


def _is_encodable(name: str) -> bool:
    # lone surrogates cannot be written out as UTF-8
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True
