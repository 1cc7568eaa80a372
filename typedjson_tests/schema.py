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
Value types shared by the tests, one or more per category.
"""

import enum
from dataclasses import dataclass, field

from typedjson.iso8601 import Date, DatetimeTz
from typedjson.model import (
    ArrayValue,
    Choice,
    CustomizedType,
    DynamicSlot,
    Enumeration,
    FormattingMode,
    NullableValue,
    SequenceValue,
    attribute,
    selection,
)


class Color(Enumeration):
    ENUMERATORS = {0: 'RED', 1: 'GREEN', 2: 'BLUE'}


class Weekday(enum.IntEnum):
    MONDAY = 1
    TUESDAY = 2


class Ticker(CustomizedType[str]):
    BASE_TYPE = str

    @classmethod
    def validate(cls, base: str, /) -> None:
        if not 1 <= len(base) <= 5:
            raise ValueError('ticker must have 1 to 5 characters')


@dataclass
class Address(SequenceValue):
    street: str = ''
    city: str = ''
    state: str = ''


@dataclass
class Employee(SequenceValue):
    name: str = ''
    home_address: Address = attribute(name='homeAddress', default_factory=Address)
    age: int = 0


class Shape(Choice):
    SELECTIONS = (
        selection('circle', float),
        selection('label', str),
        selection('corner', Address),
    )


@dataclass
class Pair(SequenceValue):
    a: int = 0
    b: ArrayValue[int] = field(default_factory=lambda: ArrayValue(int))


@dataclass
class Note(SequenceValue):
    text: str = ''
    comment: NullableValue[str] = field(default_factory=lambda: NullableValue(str))
    remark: NullableValue[str] = attribute(
        formatting_mode=FormattingMode.NILLABLE,
        default_factory=lambda: NullableValue(str),
    )


@dataclass
class Required(SequenceValue):
    key: str = attribute(required=True, default='')
    value: int = 0


@dataclass
class Tags(SequenceValue):
    """Anonymous members: the attributes of `extra` and the selection of `shape` are written inline."""
    id: int = 0
    extra: Address = attribute(formatting_mode=FormattingMode.UNTAGGED, default_factory=Address)
    shape: Shape = attribute(formatting_mode=FormattingMode.UNTAGGED, default_factory=Shape)


@dataclass
class Envelope(SequenceValue):
    id: int = 0
    body: Required = attribute(formatting_mode=FormattingMode.UNTAGGED, default_factory=Required)


@dataclass
class Blob(SequenceValue):
    data: bytes = b''
    octets: ArrayValue[int] = attribute(
        formatting_mode=FormattingMode.BASE64,
        default_factory=lambda: ArrayValue(int),
    )


@dataclass
class Everything(SequenceValue):
    """One attribute of each category."""
    flag: bool = False
    count: int = 0
    ratio: float = 0.0
    title: str = ''
    color: Color = field(default_factory=Color)
    weekday: Weekday = Weekday.MONDAY
    ticker: Ticker = field(default_factory=lambda: Ticker('IBM'))
    born: Date = field(default_factory=Date)
    updated: DatetimeTz = field(default_factory=DatetimeTz)
    shape: Shape = field(default_factory=Shape)
    scores: ArrayValue[int] = field(default_factory=lambda: ArrayValue(int))
    maybe: NullableValue[int] = field(default_factory=lambda: NullableValue(int))
    any: DynamicSlot = field(default_factory=lambda: DynamicSlot(0))
    address: Address = field(default_factory=Address)


@dataclass
class Node(SequenceValue):
    """Recursive schema, used for depth limits."""
    name: str = ''
    child: NullableValue['Node'] = field(default_factory=lambda: NullableValue(Node))


def make_chain(depth: int) -> Node:
    """A chain of `depth` nested nodes."""
    root = Node('0')
    current = root
    for index in range(1, depth):
        child = Node(str(index))
        current.child.set_value(child)
        current = child
    return root
