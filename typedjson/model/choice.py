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
Choices are tagged unions: at most one selection is active at a time, or none at all ("unset").

`Choice` implements the capability on top of a `SELECTIONS` declaration:

>>> class Shape(Choice):
...     SELECTIONS = (
...         selection('circle', float),
...         selection('label', str, id=5),
...     )
>>> shape = Shape()
>>> shape.selection_id() == Shape.UNDEFINED_SELECTION_ID
True
>>> shape.make_selection(5)
>>> shape.set_selection('hello')
>>> shape
Shape('label', 'hello')
>>> shape == Shape('label', 'hello')
True
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cache
from typing import Any, Callable, ClassVar, NamedTuple

from typedjson.model.category import Category
from typedjson.model.formatting_mode import FormattingMode, check_formatting_mode
from typedjson.model.info import SelectionInfo

_NO_VALUE: Any = object()


class ChoiceValue(ABC):
    """ Capability of the CHOICE category.
    """

    CATEGORY: ClassVar[Category] = Category.CHOICE
    UNDEFINED_SELECTION_ID: ClassVar[int] = -1

    __slots__ = ()

    @classmethod
    @abstractmethod
    def selection_infos(cls) -> tuple[SelectionInfo, ...]:
        raise NotImplementedError

    @classmethod
    def lookup_selection_info(cls, name: str) -> SelectionInfo | None:
        for info in cls.selection_infos():
            if info.name == name:
                return info
        return None

    @abstractmethod
    def selection_id(self) -> int:
        """The id of the active selection, or UNDEFINED_SELECTION_ID if unset."""
        raise NotImplementedError

    @abstractmethod
    def make_selection(self, selection_id: int) -> None:
        """ Activate the given selection holding a newly created value, UNDEFINED_SELECTION_ID makes it unset.

        A ValueError is raised for unknown ids.
        """
        raise NotImplementedError

    @abstractmethod
    def access_selection(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    def set_selection(self, value: Any) -> None:
        raise NotImplementedError

    def is_unset(self) -> bool:
        return self.selection_id() == self.UNDEFINED_SELECTION_ID

    def selection_info(self) -> SelectionInfo | None:
        selection_id = self.selection_id()
        for info in self.selection_infos():
            if info.id == selection_id:
                return info
        return None


class Selection(NamedTuple):
    name: str
    factory: Callable[[], Any]
    id: int | None
    formatting_mode: int


def selection(
    name: str,
    factory: Callable[[], Any],
    *,
    id: int | None = None,
    formatting_mode: int = FormattingMode.DEFAULT,
) -> Selection:
    """ Declare one selection of a `Choice`, `factory` creates the value held when it's made active.
    """
    check_formatting_mode(formatting_mode)
    return Selection(name, factory, id, formatting_mode)


class _ChoiceSchema(NamedTuple):
    infos: tuple[SelectionInfo, ...]
    factories: dict[int, Callable[[], Any]]


@cache
def _get_schema(cls: type[Choice]) -> _ChoiceSchema:
    infos: list[SelectionInfo] = []
    factories: dict[int, Callable[[], Any]] = {}
    names: set[str] = set()
    for index, item in enumerate(cls.SELECTIONS):
        info = SelectionInfo(item.name, index if item.id is None else item.id, item.formatting_mode)
        if info.id == cls.UNDEFINED_SELECTION_ID:
            raise TypeError(f'{cls.__name__}: selection id {info.id} is reserved')
        if info.name in names or info.id in factories:
            raise TypeError(f'{cls.__name__}: duplicate selection {info.name!r} (id={info.id})')
        infos.append(info)
        names.add(info.name)
        factories[info.id] = item.factory
    return _ChoiceSchema(tuple(infos), factories)


class Choice(ChoiceValue):
    """ Choice implementation for subclasses that declare `SELECTIONS`.
    """

    SELECTIONS: ClassVar[tuple[Selection, ...]] = ()

    __slots__ = ('_selection_id', '_selection')

    _selection_id: int
    _selection: Any

    def __init__(self, name: str | None = None, value: Any = _NO_VALUE) -> None:
        self._selection_id = self.UNDEFINED_SELECTION_ID
        self._selection = None
        if name is not None:
            info = self.lookup_selection_info(name)
            if info is None:
                raise ValueError(f'{type(self).__name__} has no selection named {name!r}')
            self.make_selection(info.id)
            if value is not _NO_VALUE:
                self._selection = value

    def __repr__(self) -> str:
        info = self.selection_info()
        if info is None:
            return f'{type(self).__name__}()'
        return f'{type(self).__name__}({info.name!r}, {self._selection!r})'

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, Choice)
        return self._selection_id == other._selection_id and self._selection == other._selection

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def selection_infos(cls) -> tuple[SelectionInfo, ...]:
        return _get_schema(cls).infos

    def selection_id(self) -> int:
        return self._selection_id

    def make_selection(self, selection_id: int) -> None:
        if selection_id == self.UNDEFINED_SELECTION_ID:
            self._selection_id = selection_id
            self._selection = None
            return
        factories = _get_schema(type(self)).factories
        if selection_id not in factories:
            raise ValueError(f'{type(self).__name__} has no selection with id {selection_id}')
        self._selection_id = selection_id
        self._selection = factories[selection_id]()

    def access_selection(self) -> Any:
        if self.is_unset():
            raise ValueError('no selection is active')
        return self._selection

    def set_selection(self, value: Any) -> None:
        if self.is_unset():
            raise ValueError('no selection is active')
        self._selection = value
