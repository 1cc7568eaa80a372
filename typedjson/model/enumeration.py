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
Enumerations map between integer values and string names.

Both `enum.Enum` subclasses with int values and `EnumerationValue` implementations are supported, the module-level
functions below work with either. Only `Enumeration` can hold an integer that has no name:

>>> class Color(Enumeration):
...     ENUMERATORS = {0: 'RED', 1: 'GREEN'}
>>> to_string(Color(1)), to_string(Color(9))
('GREEN', None)
>>> from_string(Color(), 'RED')
Color(0)
>>> from_string(Color(), 'BLUE')
Traceback (most recent call last):
    ...
ValueError: invalid Color name: 'BLUE'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Mapping

from typing_extensions import Self, override

from typedjson.model.category import Category


class EnumerationValue(ABC):
    """ Capability of the ENUMERATION category.
    """

    CATEGORY: ClassVar[Category] = Category.ENUMERATION

    __slots__ = ()

    @abstractmethod
    def to_int(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def to_string(self) -> str | None:
        """The name of this value, or None if the integer has no known name."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_int(cls, value: int, /) -> Self:
        """Build a value from a known integer, raise a ValueError otherwise."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_string(cls, name: str, /) -> Self:
        """Build a value from a known name, raise a ValueError otherwise."""
        raise NotImplementedError


class Enumeration(EnumerationValue):
    """ Enumeration implementation for subclasses that declare `ENUMERATORS`.

    The default value is the first declared enumerator.
    """

    ENUMERATORS: ClassVar[Mapping[int, str]] = {}

    __slots__ = ('_value',)

    def __init__(self, value: int | None = None) -> None:
        if value is None:
            value = next(iter(self.ENUMERATORS), 0)
        self._value = value

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value})'

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, Enumeration)
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    @override
    def to_int(self) -> int:
        return self._value

    @override
    def to_string(self) -> str | None:
        return self.ENUMERATORS.get(self._value)

    @override
    @classmethod
    def from_int(cls, value: int, /) -> Self:
        if value not in cls.ENUMERATORS:
            raise ValueError(f'invalid {cls.__name__} value: {value}')
        return cls(value)

    @override
    @classmethod
    def from_string(cls, name: str, /) -> Self:
        for value, enumerator in cls.ENUMERATORS.items():
            if enumerator == name:
                return cls(value)
        raise ValueError(f'invalid {cls.__name__} name: {name!r}')


def to_int(value: Any) -> int:
    if isinstance(value, Enum):
        return int(value.value)
    return value.to_int()


def to_string(value: Any) -> str | None:
    if isinstance(value, Enum):
        return value.name
    return value.to_string()


def from_int(prototype: Any, number: int) -> Any:
    """ Build a value of the same type as `prototype` from a known integer.
    """
    if isinstance(prototype, Enum):
        try:
            return type(prototype)(number)
        except ValueError:
            raise ValueError(f'invalid {type(prototype).__name__} value: {number}')
    return type(prototype).from_int(number)


def from_string(prototype: Any, name: str) -> Any:
    """ Build a value of the same type as `prototype` from a known name.
    """
    if isinstance(prototype, Enum):
        try:
            return type(prototype)[name]
        except KeyError:
            raise ValueError(f'invalid {type(prototype).__name__} name: {name!r}')
    return type(prototype).from_string(name)
