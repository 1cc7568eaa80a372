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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, TypeAlias

from typing_extensions import Self, override

from typedjson.model.category import Category

# raw scalars that a SimpleValue can be reduced to
RawScalar: TypeAlias = bool | int | float | str


class SimpleValue(ABC):
    """ Base for user-defined scalars that are written as one JSON number, string or boolean.

    `get` reduces the value to a raw scalar and `set` builds a new value from one, raising a ValueError if the raw
    scalar is not acceptable. The kind of raw scalar that `set` expects is the kind that `get` returns.
    """

    CATEGORY: ClassVar[Category] = Category.SIMPLE

    __slots__ = ()

    @abstractmethod
    def get(self) -> RawScalar:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def set(cls, raw: RawScalar, /) -> Self:
        raise NotImplementedError


class Char(SimpleValue):
    """ A single character, written as a JSON string of length 1.

    >>> Char('x').get()
    'x'
    >>> Char.set('xy')
    Traceback (most recent call last):
        ...
    ValueError: expected a single character
    """

    __slots__ = ('_char',)

    def __init__(self, char: str = '\0') -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError('expected a single character')
        self._char = char

    def __repr__(self) -> str:
        return f'Char({self._char!r})'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Char) and self._char == other._char

    def __hash__(self) -> int:
        return hash(self._char)

    @override
    def get(self) -> str:
        return self._char

    @override
    @classmethod
    def set(cls, raw: RawScalar, /) -> Self:
        if not isinstance(raw, str):
            raise ValueError('expected a string')
        return cls(raw)
