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
Every value presented to the codec belongs to exactly one category. The category decides which capability interface
the engines use to walk the value:

    SIMPLE           -> a scalar: bool, int, float, str, the calendar types or a `SimpleValue`
    ARRAY            -> an ordered collection: `ArrayValue`, list, tuple, bytes or bytearray
    SEQUENCE         -> a record with attributes in schema order: `SequenceValue`
    CHOICE           -> a tagged union: `ChoiceValue`
    ENUMERATION      -> an int/name mapping: `EnumerationValue` or an `enum.Enum` with int values
    NULLABLE_VALUE   -> either empty or holding one value: `NullableValue`
    CUSTOMIZED_TYPE  -> a validated scalar over a base value: `CustomizedValue`
    DYNAMIC_TYPE     -> a value whose real category is only known at runtime: `DynamicValue`

A class joins a category by declaring a `CATEGORY` class attribute and implementing the methods of that category's
capability, inheriting from the base classes in this package is a convenience and not a requirement.

>>> select_category(1), select_category('abc'), select_category(b'')
(<Category.SIMPLE: 'simple'>, <Category.SIMPLE: 'simple'>, <Category.ARRAY: 'array'>)
>>> select_category(None)
Traceback (most recent call last):
    ...
TypeError: value of type NoneType does not belong to any category
"""

from enum import Enum
from typing import Any


class Category(Enum):
    SIMPLE = 'simple'
    ARRAY = 'array'
    SEQUENCE = 'sequence'
    CHOICE = 'choice'
    ENUMERATION = 'enumeration'
    NULLABLE_VALUE = 'nullable_value'
    CUSTOMIZED_TYPE = 'customized_type'
    DYNAMIC_TYPE = 'dynamic_type'


# builtin scalars that are treated as SIMPLE without declaring a category
BUILTIN_SIMPLE_TYPES: tuple[type, ...] = (bool, int, float, str)

# builtin collections that are treated as ARRAY without declaring a category
BUILTIN_ARRAY_TYPES: tuple[type, ...] = (bytes, bytearray, list, tuple)


def select_category(value: Any) -> Category:
    """ Classify the given value, a TypeError is raised if it does not belong to any category.

    The declared `CATEGORY` takes precedence, so an `ArrayValue` (which is a list) or an `IntEnum` member that declares
    another category are classified by their declaration.
    """
    category = getattr(type(value), 'CATEGORY', None)
    if isinstance(category, Category):
        return category
    if isinstance(value, Enum):
        if not isinstance(value.value, int):
            raise TypeError(f'enum {type(value).__name__} must have int values')
        return Category.ENUMERATION
    if isinstance(value, BUILTIN_SIMPLE_TYPES):
        return Category.SIMPLE
    if isinstance(value, BUILTIN_ARRAY_TYPES):
        return Category.ARRAY
    raise TypeError(f'value of type {type(value).__name__} does not belong to any category')


def is_byte_array(value: Any) -> bool:
    """ Byte arrays are encoded as base64 strings instead of JSON arrays.
    """
    return isinstance(value, (bytes, bytearray))
