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

import math

from typedjson.codec import DecoderOptions
from typedjson.exception import (
    DecodeError,
    InvalidDateForMidnight,
    InvalidDateTimeFormat,
    JsonSyntaxError,
    MissingRequiredAttribute,
    RecursionLimitExceeded,
    SchemaViolation,
    TypeMismatch,
    ValidationFailure,
)
from typedjson.iso8601 import Date, Datetime, DatetimeTz, Time
from typedjson.model import ArrayValue, Char, DynamicSlot, NullableValue
from typedjson.serialization import Deserializer
from typedjson_tests import unittest
from typedjson_tests.schema import (
    Address,
    Blob,
    Color,
    Employee,
    Envelope,
    Node,
    Note,
    Pair,
    Required,
    Shape,
    Tags,
    Ticker,
    Weekday,
)


class DecoderTest(unittest.TestCase):
    def test_scalars(self) -> None:
        self.assertIs(self.decode('true', False), True)
        self.assertEqual(self.decode('-12', 0), -12)
        self.assertEqual(self.decode('21.0', 0), 21)
        self.assertEqual(self.decode('3', 0.0), 3.0)
        self.assertEqual(self.decode('"-inf"', 0.0), -math.inf)
        self.assertEqual(self.decode('"a\\nb"', ''), 'a\nb')
        self.assertEqual(self.decode('"x"', Char()), Char('x'))
        self.assertEqual(self.decode('"2020-02-29"', Date()), Date(2020, 2, 29))

    def test_scalar_mismatch(self) -> None:
        for text, target in [('"1"', 0), ('1.5', 0), ('true', 0), ('1', False), ('null', ''), ('1', ''),
                             ('"abc"', 0.0), ('"xy"', Char()), ('1', Date()), ('[1]', 0)]:
            with self.subTest(text=text, target=target):
                with self.assertRaises(TypeMismatch):
                    self.decode(text, target)

    def test_sequence(self) -> None:
        text = ' { "age" : 21 ,\n "homeAddress" : {"city": "Some City"}, "name": "Bob" } \n'
        employee = self.decode(text, Employee())
        self.assertEqual(employee, Employee('Bob', Address(city='Some City'), 21))
        self.assertEqual(self.decoder.logged_messages(), '')

    def test_sequence_is_populated_in_place(self) -> None:
        employee = Employee('Bob', Address('Some Street'), 21)
        result = self.decode('{"age":22}', employee)
        self.assertIs(result, employee)
        self.assertEqual(employee, Employee('Bob', Address('Some Street'), 22))

    def test_unknown_elements(self) -> None:
        text = '{"name":"Bob","x":{"a":[1,{"b":null}],"c":"}"},"age":3}'
        self.assertEqual(self.decode(text, Employee()), Employee('Bob', age=3))
        self.assertEqual(self.decoder.logged_messages(), "Skipping unknown element named: 'x'.\n")

    def test_unknown_elements_strict(self) -> None:
        with self.assertRaises(SchemaViolation):
            self.decode('{"street":"s","x":1}', Address(), skip_unknown_elements=False)
        self.assertEqual(self.decoder.logged_messages(), "Unknown element named: 'x'.\n")

    def test_required(self) -> None:
        self.assertEqual(self.decode('{"key":"k"}', Required()), Required('k'))
        with self.assertRaises(MissingRequiredAttribute):
            self.decode('{"value":1}', Required())
        self.assertEqual(self.decoder.logged_messages(), "Missing required elements: 'key'.\n")

    def test_required_inside_untagged(self) -> None:
        self.assertEqual(self.decode('{"id":1,"key":"k","value":2}', Envelope()), Envelope(1, Required('k', 2)))
        with self.assertRaises(MissingRequiredAttribute):
            self.decode('{"id":1,"value":2}', Envelope())
        self.assertEqual(self.decoder.logged_messages(), "Missing required elements: 'key'.\n")
        with self.assertRaises(MissingRequiredAttribute):
            self.decode('{}', Envelope())

    def test_element_errors_are_traced(self) -> None:
        with self.assertRaises(TypeMismatch):
            self.decode('{"homeAddress":{"city":1}}', Employee())
        self.assertEqual(self.decoder.logged_messages(), ''.join([
            "Unable to decode value of element named: 'city'.\n",
            "Unable to decode value of element named: 'homeAddress'.\n",
        ]))

    def test_syntax_errors(self) -> None:
        for text in ['', '{', '{"name":"Bob",}', '{"name" "Bob"}', '{"age":21 "name":"x"}', '{"age":x}',
                     '{name:"Bob"}', '{"name":"Bob"} x', '{"name":"Bob"}}', '{"name":"a\nb"}', '[1,2', '[1,]']:
            with self.subTest(text=text):
                target = ArrayValue(int) if text.startswith('[') else Employee()
                with self.assertRaises(JsonSyntaxError):
                    self.decode(text, target)

    def test_syntax_error_position(self) -> None:
        with self.assertRaises(JsonSyntaxError) as cm:
            self.decode('[1] [2]', ArrayValue(int))
        self.assertIn('at position 4', str(cm.exception))
        self.assertTrue(self.decoder.logged_messages().startswith('Syntax error at position 4: '))

    def test_choice(self) -> None:
        self.assertEqual(self.decode('{"label":"x"}', Shape()), Shape('label', 'x'))
        self.assertEqual(self.decode('{"corner":{"state":"s"}}', Shape()), Shape('corner', Address(state='s')))
        self.assertEqual(self.decode(' { } ', Shape('label', 'x')), Shape())

    def test_choice_errors(self) -> None:
        with self.assertRaises(SchemaViolation):
            self.decode('{"square":1}', Shape())
        self.assertEqual(self.decoder.logged_messages(), "Unknown selection named: 'square'.\n")
        with self.assertRaises(SchemaViolation):
            self.decode('{"label":"x","circle":1}', Shape())
        with self.assertRaises(TypeMismatch):
            self.decode('[]', Shape())
        with self.assertRaises(TypeMismatch):
            self.decode('{"circle":"x"}', Shape())

    def test_enumeration(self) -> None:
        self.assertEqual(self.decode('"BLUE"', Color()), Color(2))
        self.assertEqual(self.decode('2', Color()), Color(2))
        self.assertIs(self.decode('"TUESDAY"', Weekday.MONDAY), Weekday.TUESDAY)
        self.assertIs(self.decode('1', Weekday.TUESDAY), Weekday.MONDAY)

    def test_enumeration_errors(self) -> None:
        for text in ['7', '"blue"', '"PURPLE"']:
            with self.subTest(text=text):
                with self.assertRaises(SchemaViolation):
                    self.decode(text, Color())
        for text in ['1.5', 'true', '{}']:
            with self.subTest(text=text):
                with self.assertRaises(TypeMismatch):
                    self.decode(text, Color())

    def test_customized(self) -> None:
        self.assertEqual(self.decode('"MSFT"', Ticker('IBM')), Ticker('MSFT'))
        with self.assertRaises(TypeMismatch):
            self.decode('1', Ticker('IBM'))
        with self.assertRaises(ValidationFailure):
            self.decode('"TOOLONG"', Ticker('IBM'))
        self.assertEqual(self.decoder.logged_messages(),
                         "Unable to convert 'TOOLONG' to Ticker: ticker must have 1 to 5 characters.\n")

    def test_dynamic(self) -> None:
        slot = self.decode('5', DynamicSlot(0))
        self.assertEqual(slot.resolve(), 5)
        slot = self.decode('{"street":"s"}', DynamicSlot(Address()))
        self.assertEqual(slot.resolve(), Address('s'))
        with self.assertRaises(TypeMismatch):
            self.decode('"5"', DynamicSlot(0))

    def test_nullable(self) -> None:
        self.assertEqual(self.decode('null', NullableValue(int, 3)), NullableValue(int))
        self.assertEqual(self.decode('4', NullableValue(int)), NullableValue(int, 4))
        note = self.decode('{"text":"a","comment":null,"remark":"r"}', Note(comment=NullableValue(str, 'c')))
        self.assertEqual(note, Note('a', NullableValue(str), NullableValue(str, 'r')))

    def test_arrays(self) -> None:
        array = ArrayValue(int, [9, 9, 9, 9])
        self.assertIs(self.decode('[1, 2, 3]', array), array)
        self.assertEqual(array, [1, 2, 3])
        self.assertEqual(self.decode('[ ]', ArrayValue(int, [1])), [])
        nested = self.decode('[[1],[],[2,3]]', ArrayValue(lambda: ArrayValue(int)))
        self.assertEqual(nested, [[1], [], [2, 3]])
        self.assertEqual(self.decode('[{"a":1},{"b":[2]}]', ArrayValue(Pair)), [Pair(1), Pair(b=ArrayValue(int, [2]))])
        with self.assertRaises(TypeMismatch):
            self.decode('[1,"a"]', ArrayValue(int))
        with self.assertRaises(TypeMismatch):
            self.decode('{}', ArrayValue(int))

    def test_plain_list_target(self) -> None:
        with self.assertRaises(TypeMismatch):
            self.decode('[1]', [])

    def test_byte_arrays(self) -> None:
        self.assertEqual(self.decode('"AQI="', b''), b'\x01\x02')
        self.assertEqual(self.decode('[1, 2]', b''), b'\x01\x02')
        self.assertEqual(self.decode('[]', b'\x00'), b'')
        target = bytearray(b'\xff')
        self.assertIs(self.decode('"AQI="', target), target)
        self.assertEqual(target, bytearray(b'\x01\x02'))
        for text in ['"!!"', '[256]', '[-1]', '[1.5]', '1']:
            with self.subTest(text=text):
                with self.assertRaises(TypeMismatch):
                    self.decode(text, b'')

    def test_base64_mode(self) -> None:
        expected = Blob(b'\x01\x02', ArrayValue(int, [1, 2]))
        self.assertEqual(self.decode('{"data":"AQI=","octets":"AQI="}', Blob()), expected)
        self.assertEqual(self.decode('{"data":[1,2],"octets":[1,2]}', Blob()), expected)

    def test_untagged(self) -> None:
        tags = self.decode('{"id":1,"street":"s","label":"x","state":"st"}', Tags(), skip_unknown_elements=False)
        self.assertEqual(tags, Tags(1, Address('s', state='st'), Shape('label', 'x')))

    def test_calendar(self) -> None:
        text = '"2005-01-31T08:59:59.123-05:30"'
        self.assertEqual(self.decode(text, DatetimeTz()),
                         DatetimeTz(Datetime(Date(2005, 1, 31), Time(8, 59, 59, 123)), -330))
        self.assertEqual(self.decode(text, Datetime()), Datetime(Date(2005, 1, 31), Time(14, 29, 59, 123)))
        with self.assertRaises(InvalidDateTimeFormat):
            self.decode('"2020-13-01"', Date())

    def test_midnight(self) -> None:
        with self.assertRaises(InvalidDateForMidnight):
            self.decode('"2020-01-01T24:00:00"', Datetime())
        self.assertTrue(self.decoder.logged_messages().startswith(
            "Unable to parse '2020-01-01T24:00:00' as Datetime: "))
        value = self.decode('"2020-01-01T24:00:00"', Datetime(), advance_midnight_to_next_day=True)
        self.assertEqual(value, Datetime(Date(2020, 1, 2), Time(0)))

    def test_recursion_limit(self) -> None:
        text = '{"name":"0","child":' * 100 + 'null' + '}' * 100
        with self.assertRaises(RecursionLimitExceeded):
            self.decode(text, Node())
        self.assertIn('Maximum depth of 32 exceeded', self.decoder.logged_messages())
        with self.assertRaises(RecursionLimitExceeded):
            self.decode('{"x":' + '[' * 100 + ']' * 100 + '}', Address())
        self.assertEqual(self.decode('{"x":[[[]]]}', Address()), Address())

    def test_sources(self) -> None:
        text = b'{"street":"caf\xc3\xa9"}'
        self.assertEqual(self.decode(text, Address()), Address('café'))  # type: ignore[arg-type]
        self.assertEqual(self.decoder.decode('[1,2]garbage', ArrayValue(int), length=5), [1, 2])
        self.assertEqual(self.decoder.decode(bytearray(b'[1] '), ArrayValue(int)), [1])
        de = Deserializer.build_str_deserializer('[3]')
        self.assertEqual(self.decoder.decode(de, ArrayValue(int), DecoderOptions()), [3])

    def test_invalid_utf8(self) -> None:
        with self.assertRaises(JsonSyntaxError):
            self.decoder.decode(b'"\xff"', '')
        self.assertTrue(self.decoder.logged_messages().startswith('Unable to read the input: '))

    def test_invalid_length(self) -> None:
        with self.assertRaises(JsonSyntaxError):
            self.decoder.decode('[1]', ArrayValue(int), length=10)
        self.assertEqual(self.decoder.logged_messages(),
                         'Unable to read the input: invalid length 10 for input of length 3.\n')
        with self.assertRaises(JsonSyntaxError):
            self.decoder.decode(b'[1]', ArrayValue(int), length=-1)

    def test_errors_are_decode_errors(self) -> None:
        for exc in (JsonSyntaxError, TypeMismatch, SchemaViolation, MissingRequiredAttribute, InvalidDateTimeFormat,
                    ValidationFailure, RecursionLimitExceeded):
            self.assertTrue(issubclass(exc, DecodeError))

    def test_unsupported_target(self) -> None:
        with self.assertRaises(TypeMismatch):
            self.decode('{}', {})
        self.assertEqual(self.decoder.logged_messages(), 'Unable to decode into a value of type dict.\n')
