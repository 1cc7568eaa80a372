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

import enum
from dataclasses import dataclass

import pytest

from typedjson.iso8601 import Date, DatetimeTz, Time
from typedjson.model import (
    ArrayValue,
    Category,
    Char,
    DynamicSlot,
    NullableValue,
    SequenceValue,
    is_byte_array,
    resolve_dynamic,
    select_category,
)
from typedjson_tests.schema import Address, Color, Employee, Shape, Ticker, Weekday


class Text(enum.Enum):
    A = 'a'


@pytest.mark.parametrize('value, category', [
    (True, Category.SIMPLE),
    (1, Category.SIMPLE),
    (1.5, Category.SIMPLE),
    ('abc', Category.SIMPLE),
    (Char('x'), Category.SIMPLE),
    (Date(), Category.SIMPLE),
    (Time(1), Category.SIMPLE),
    (DatetimeTz(), Category.SIMPLE),
    ([1, 2], Category.ARRAY),
    ((1, 2), Category.ARRAY),
    (b'\x01', Category.ARRAY),
    (bytearray(), Category.ARRAY),
    (ArrayValue(int), Category.ARRAY),
    (Address(), Category.SEQUENCE),
    (Shape(), Category.CHOICE),
    (Color(), Category.ENUMERATION),
    (Weekday.MONDAY, Category.ENUMERATION),
    (NullableValue(int), Category.NULLABLE_VALUE),
    (Ticker('IBM'), Category.CUSTOMIZED_TYPE),
    (DynamicSlot(1), Category.DYNAMIC_TYPE),
])
def test_select_category(value: object, category: Category) -> None:
    assert select_category(value) is category


@pytest.mark.parametrize('value', [None, {}, set(), object(), 1j, Text.A])
def test_select_category_unsupported(value: object) -> None:
    with pytest.raises(TypeError):
        select_category(value)


def test_enum_and_list_subclasses() -> None:
    # both are also ints or lists, their own classification comes first
    assert select_category(Weekday.TUESDAY) is Category.ENUMERATION
    assert select_category(ArrayValue(int, [1])) is Category.ARRAY


def test_is_byte_array() -> None:
    assert is_byte_array(b'')
    assert is_byte_array(bytearray(b'x'))
    assert not is_byte_array([1, 2])
    assert not is_byte_array('ab')


def test_resolve_dynamic() -> None:
    slot = DynamicSlot(Employee(name='Bob'))
    value, category = resolve_dynamic(slot)
    assert value == Employee(name='Bob')
    assert category is Category.SEQUENCE
    slot.assign(Color(2))
    assert resolve_dynamic(slot) == (Color(2), Category.ENUMERATION)


def test_plain_sequence_needs_dataclass() -> None:
    class NotADataclass(SequenceValue):
        pass

    with pytest.raises(TypeError):
        NotADataclass.attribute_infos()


def test_sequence_duplicate_names() -> None:
    from typedjson.model import attribute

    @dataclass
    class Duplicated(SequenceValue):
        a: int = 0
        b: int = attribute(name='a', default=0)

    with pytest.raises(TypeError, match='duplicate attribute name'):
        Duplicated.attribute_infos()
