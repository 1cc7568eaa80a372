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
Sequences are records whose attributes are visited in a fixed, schema-defined order.

The schema of a sequence is the ordered tuple of `AttributeInfo` returned by `attribute_infos`. The default
implementation reads it from the dataclass fields of the subclass, in declaration order, and `attribute()` can be
used to customize the JSON name, the id, the formatting mode and whether the attribute is required:

>>> from dataclasses import dataclass
>>> @dataclass
... class Employee(SequenceValue):
...     name: str = ''
...     home_address: str = attribute(name='homeAddress', default='')
...     age: int = attribute(id=7, required=True, default=0)
>>> [info.name for info in Employee.attribute_infos()]
['name', 'homeAddress', 'age']
>>> Employee.lookup_attribute_info('age')
AttributeInfo(name='age', id=7, formatting_mode=0)
>>> [(info.name, value) for value, info in Employee(name='Bob', age=21).access_attributes()]
[('name', 'Bob'), ('homeAddress', ''), ('age', 21)]
"""

from __future__ import annotations

import dataclasses
from abc import ABC
from functools import cache
from typing import Any, Callable, ClassVar, Iterator, NamedTuple

from typedjson.model.category import Category
from typedjson.model.formatting_mode import FormattingMode, check_formatting_mode
from typedjson.model.info import AttributeInfo

_METADATA_KEY = 'typedjson'


class _AttributeSchema(NamedTuple):
    name: str | None
    id: int | None
    formatting_mode: int
    required: bool


class _SequenceSchema(NamedTuple):
    infos: tuple[AttributeInfo, ...]
    by_name: dict[str, AttributeInfo]
    field_names: dict[int, str]
    required_ids: frozenset[int]


def attribute(
    *,
    name: str | None = None,
    id: int | None = None,
    formatting_mode: int = FormattingMode.DEFAULT,
    required: bool = False,
    default: Any = dataclasses.MISSING,
    default_factory: Callable[[], Any] | Any = dataclasses.MISSING,
) -> Any:
    """ Declare a dataclass field of a `SequenceValue` with schema metadata.

    When `name` is not given the field name is used, when `id` is not given the field's position is used.
    """
    check_formatting_mode(formatting_mode)
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_METADATA_KEY: _AttributeSchema(name, id, formatting_mode, required)},
    )


@cache
def _get_schema(cls: type) -> _SequenceSchema:
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f'{cls.__name__} must be a dataclass or override the SequenceValue schema methods')
    infos: list[AttributeInfo] = []
    by_name: dict[str, AttributeInfo] = {}
    field_names: dict[int, str] = {}
    required_ids: set[int] = set()
    for index, field in enumerate(dataclasses.fields(cls)):
        schema = field.metadata.get(_METADATA_KEY) or _AttributeSchema(None, None, FormattingMode.DEFAULT, False)
        info = AttributeInfo(
            name=field.name if schema.name is None else schema.name,
            id=index if schema.id is None else schema.id,
            formatting_mode=schema.formatting_mode,
        )
        if info.name in by_name:
            raise TypeError(f'{cls.__name__}: duplicate attribute name {info.name!r}')
        if info.id in field_names:
            raise TypeError(f'{cls.__name__}: duplicate attribute id {info.id}')
        infos.append(info)
        by_name[info.name] = info
        field_names[info.id] = field.name
        if schema.required:
            required_ids.add(info.id)
    return _SequenceSchema(tuple(infos), by_name, field_names, frozenset(required_ids))


class SequenceValue(ABC):
    """ Capability of the SEQUENCE category.

    Subclasses are expected to be dataclasses, otherwise all the methods below must be overridden.
    """

    CATEGORY: ClassVar[Category] = Category.SEQUENCE

    @classmethod
    def attribute_infos(cls) -> tuple[AttributeInfo, ...]:
        """All attributes, in schema order."""
        return _get_schema(cls).infos

    @classmethod
    def lookup_attribute_info(cls, name: str) -> AttributeInfo | None:
        """Find an attribute by its (case-sensitive) name, or None if the schema doesn't have it."""
        return _get_schema(cls).by_name.get(name)

    @classmethod
    def is_required(cls, info: AttributeInfo) -> bool:
        return info.id in _get_schema(cls).required_ids

    def num_attributes(self) -> int:
        return len(self.attribute_infos())

    def access_attribute(self, info: AttributeInfo) -> Any:
        return getattr(self, _get_schema(type(self)).field_names[info.id])

    def set_attribute(self, info: AttributeInfo, value: Any) -> None:
        setattr(self, _get_schema(type(self)).field_names[info.id], value)

    def access_attributes(self) -> Iterator[tuple[Any, AttributeInfo]]:
        """Yield `(value, info)` for each attribute, in schema order."""
        for info in self.attribute_infos():
            yield self.access_attribute(info), info
