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
from typing import Any, ClassVar

from typing_extensions import override

from typedjson.model.category import Category, select_category


class DynamicValue(ABC):
    """ Capability of the DYNAMIC_TYPE category.

    A dynamic value forwards to an underlying value whose category is only known at runtime. The engines resolve it
    and dispatch again on the underlying value's category. When decoding, the populated underlying value is handed
    back through `assign`, because scalars cannot be populated in place.
    """

    CATEGORY: ClassVar[Category] = Category.DYNAMIC_TYPE

    __slots__ = ()

    @abstractmethod
    def resolve(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    def assign(self, value: Any, /) -> None:
        raise NotImplementedError


class DynamicSlot(DynamicValue):
    """ A dynamic value that simply holds whatever value it was given.

    >>> slot = DynamicSlot(42)
    >>> resolve_dynamic(slot)
    (42, <Category.SIMPLE: 'simple'>)
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'DynamicSlot({self._value!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicSlot):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    @override
    def resolve(self) -> Any:
        return self._value

    @override
    def assign(self, value: Any, /) -> None:
        self._value = value


def resolve_dynamic(value: DynamicValue) -> tuple[Any, Category]:
    """ Resolve a dynamic value into its underlying value and that value's category.
    """
    underlying = value.resolve()
    return underlying, select_category(underlying)
