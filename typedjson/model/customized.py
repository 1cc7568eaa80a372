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
Customized types are scalars restricted by validation logic over a base representation, e.g. a string with a maximum
length or an integer in a range. The codec only ever deals with the base value, it never inspects the validation.

>>> class Ticker(CustomizedType[str]):
...     BASE_TYPE = str
...     @classmethod
...     def validate(cls, base):
...         if not 1 <= len(base) <= 5:
...             raise ValueError('ticker must have 1 to 5 characters')
>>> Ticker.from_base('IBM').to_base()
'IBM'
>>> Ticker.from_base('TOOLONG')
Traceback (most recent call last):
    ...
ValueError: ticker must have 1 to 5 characters
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Generic, TypeVar

from typing_extensions import Self, override

from typedjson.model.category import Category

B = TypeVar('B')


class CustomizedValue(ABC, Generic[B]):
    """ Capability of the CUSTOMIZED_TYPE category.
    """

    CATEGORY: ClassVar[Category] = Category.CUSTOMIZED_TYPE

    __slots__ = ()

    @abstractmethod
    def to_base(self) -> B:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def base_prototype(cls) -> B:
        """A newly created base value, used as the target when decoding the base representation."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_base(cls, base: B, /) -> Self:
        """Build a value from its base representation, raise a ValueError if validation fails."""
        raise NotImplementedError


class CustomizedType(CustomizedValue[B]):
    """ CustomizedValue implementation for subclasses that declare `BASE_TYPE` and override `validate`.
    """

    BASE_TYPE: ClassVar[Callable[[], Any]]

    __slots__ = ('_base',)

    def __init__(self, base: B | None = None) -> None:
        if base is None:
            base = self.base_prototype()
        self.validate(base)
        self._base = base

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._base!r})'

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, CustomizedType)
        return self._base == other._base

    def __hash__(self) -> int:
        return hash((type(self), self._base))

    @classmethod
    def validate(cls, base: B, /) -> None:
        """Raise a ValueError if `base` is not acceptable, accept everything by default."""
        pass

    @override
    def to_base(self) -> B:
        return self._base

    @override
    @classmethod
    def base_prototype(cls) -> B:
        return cls.BASE_TYPE()

    @override
    @classmethod
    def from_base(cls, base: B, /) -> Self:
        return cls(base)
