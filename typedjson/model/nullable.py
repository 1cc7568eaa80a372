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

from typing import Any, Callable, ClassVar, Generic, TypeVar

from typedjson.model.category import Category

T = TypeVar('T')

_NO_VALUE: Any = object()


class NullableValue(Generic[T]):
    """ Either empty (null) or holding exactly one value of a fixed kind.

    The payload is only created when the nullable is given a value, `factory` is what creates it on `make_value`.

    >>> nullable = NullableValue(int)
    >>> nullable.is_null()
    True
    >>> nullable.make_value()
    >>> nullable.value()
    0
    >>> nullable == NullableValue(int, 0)
    True
    >>> nullable.reset()
    >>> nullable
    NullableValue(null)
    """

    CATEGORY: ClassVar[Category] = Category.NULLABLE_VALUE

    __slots__ = ('_factory', '_has_value', '_value')

    def __init__(self, factory: Callable[[], T], value: T = _NO_VALUE) -> None:
        self._factory = factory
        self._has_value = value is not _NO_VALUE
        self._value = value if self._has_value else None

    def __repr__(self) -> str:
        if not self._has_value:
            return 'NullableValue(null)'
        return f'NullableValue({self._value!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NullableValue):
            return NotImplemented
        if self._has_value != other._has_value:
            return False
        return not self._has_value or self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def is_null(self) -> bool:
        return not self._has_value

    def value(self) -> T:
        if not self._has_value:
            raise ValueError('nullable value is null')
        return self._value  # type: ignore[return-value]

    def make_value(self) -> None:
        """Replace the current state with a newly created value."""
        self._value = self._factory()
        self._has_value = True

    def set_value(self, value: T) -> None:
        self._value = value
        self._has_value = True

    def reset(self) -> None:
        self._value = None
        self._has_value = False
