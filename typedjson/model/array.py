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

from typing import Callable, ClassVar, Iterable, TypeVar

from typedjson.model.category import Category

T = TypeVar('T')


class ArrayValue(list[T]):
    """ An ordered collection that knows how to create its own elements.

    Plain lists and tuples can be encoded, but decoding needs to create new elements of the right kind before
    populating them, so a decoding target must be an `ArrayValue` (or bytes/bytearray, for byte arrays).

    >>> array = ArrayValue(int, [1, 2])
    >>> array.append_element()
    2
    >>> array
    ArrayValue([1, 2, 0])
    >>> array == [1, 2, 0]
    True
    """

    CATEGORY: ClassVar[Category] = Category.ARRAY

    def __init__(self, element_factory: Callable[[], T], iterable: Iterable[T] = (), /) -> None:
        super().__init__(iterable)
        self.element_factory = element_factory

    def __repr__(self) -> str:
        return f'ArrayValue({list(self)!r})'

    def size(self) -> int:
        return len(self)

    def access_element(self, index: int) -> T:
        return self[index]

    def set_element(self, index: int, value: T) -> None:
        self[index] = value

    def append_element(self) -> int:
        """Append a newly created element and return its index."""
        self.append(self.element_factory())
        return len(self) - 1

    def resize(self, size: int) -> None:
        if size < 0:
            raise ValueError('size cannot be negative')
        if size < len(self):
            del self[size:]
        while len(self) < size:
            self.append(self.element_factory())
