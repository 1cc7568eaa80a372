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

import io

import pytest

from typedjson.serialization import (
    BadDataError,
    Deserializer,
    OutOfDataError,
    Serializer,
    TooLongError,
    TrailingDataError,
)


class TestStrSerializer:
    def test_write(self) -> None:
        se = Serializer.build_str_serializer()
        se.write_char('[')
        se.write_text('1,2')
        se.write_spaces(2)
        se.write_newline()
        se.write_text('')
        se.write_char(']')
        assert se.cur_pos() == 8
        assert se.finalize() == '[1,2  \n]'

    def test_finalize_twice(self) -> None:
        se = Serializer.build_str_serializer()
        se.write_text('ab')
        assert se.finalize() == 'ab'
        se.write_text('c')
        assert se.finalize() == 'abc'

    def test_capacity(self) -> None:
        se = Serializer.build_str_serializer(4)
        assert se.capacity == 4
        se.write_text('abc')
        with pytest.raises(TooLongError):
            se.write_text('de')
        # a failed write leaves the output untouched
        assert se.finalize() == 'abc'
        se.write_char('d')
        with pytest.raises(TooLongError):
            se.write_char('e')
        assert se.finalize() == 'abcd'

    def test_negative_capacity(self) -> None:
        with pytest.raises(ValueError):
            Serializer.build_str_serializer(-1)

    def test_max_length(self) -> None:
        se = Serializer.build_str_serializer()
        se.write_text('abc', max_length=3)
        with pytest.raises(TooLongError):
            se.write_text('abcd', max_length=3)
        assert se.finalize() == 'abc'


class TestStreamSerializer:
    def test_write(self) -> None:
        stream = io.StringIO()
        se = Serializer.build_stream_serializer(stream)
        assert se.stream is stream
        se.write_text('{"a":')
        se.write_spaces(1)
        se.write_char('1')
        se.write_char('}')
        assert se.cur_pos() == 8
        assert stream.getvalue() == '{"a": 1}'
        # the stream is left open
        assert not stream.closed


class TestStrDeserializer:
    def test_read(self) -> None:
        de = Deserializer.build_str_deserializer('ab cd')
        assert de.peek_char() == 'a'
        assert de.read_char() == 'a'
        assert de.read_until(' ') == 'b'
        de.skip_whitespace()
        assert de.cur_pos() == 3
        assert de.read_text(2) == 'cd'
        assert de.is_empty()
        de.finalize()

    def test_out_of_data(self) -> None:
        de = Deserializer.build_str_deserializer('ab')
        with pytest.raises(OutOfDataError):
            de.read_text(3)
        de.read_text(2)
        with pytest.raises(OutOfDataError):
            de.peek_char()
        with pytest.raises(OutOfDataError):
            de.read_char()

    def test_read_text_negative(self) -> None:
        with pytest.raises(ValueError):
            Deserializer.build_str_deserializer('ab').read_text(-1)

    def test_read_until_and_while(self) -> None:
        de = Deserializer.build_str_deserializer('123abc')
        assert de.read_while('0123456789') == '123'
        assert de.read_until('xyz') == 'abc'
        assert de.read_until('') == ''
        de.finalize()

    def test_trailing_data(self) -> None:
        de = Deserializer.build_str_deserializer('1 2')
        de.read_char()
        de.skip_whitespace()
        with pytest.raises(TrailingDataError):
            de.finalize()

    def test_length(self) -> None:
        de = Deserializer.build_str_deserializer('truefalse', 4)
        assert de.read_until('') == 'true'
        de.finalize()
        with pytest.raises(BadDataError, match='invalid length 5 for input of length 4'):
            Deserializer.build_str_deserializer('true', 5)
        with pytest.raises(BadDataError):
            Deserializer.build_str_deserializer('true', -1)

    def test_bytes(self) -> None:
        de = Deserializer.build_str_deserializer('"café"'.encode('utf-8'))
        assert de.read_text(6) == '"café"'
        de = Deserializer.build_str_deserializer(memoryview(b'[1] junk'), 3)
        assert de.read_until('') == '[1]'

    def test_invalid_utf8(self) -> None:
        with pytest.raises(BadDataError):
            Deserializer.build_str_deserializer(b'"\xff"')
        # the length can cut a multi-byte character in half
        with pytest.raises(BadDataError):
            Deserializer.build_str_deserializer('é'.encode('utf-8'), 1)

    def test_context(self) -> None:
        de = Deserializer.build_str_deserializer('0123456789' * 3)
        de.read_text(5)
        assert de.context(4) == '5678'
