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

from typedjson.model.array import ArrayValue
from typedjson.model.category import Category, is_byte_array, select_category
from typedjson.model.choice import Choice, ChoiceValue, Selection, selection
from typedjson.model.customized import CustomizedType, CustomizedValue
from typedjson.model.dynamic import DynamicSlot, DynamicValue, resolve_dynamic
from typedjson.model.enumeration import Enumeration, EnumerationValue
from typedjson.model.formatting_mode import FormattingMode
from typedjson.model.info import AttributeInfo, SelectionInfo
from typedjson.model.nullable import NullableValue
from typedjson.model.sequence import SequenceValue, attribute
from typedjson.model.simple import Char, SimpleValue

__all__ = [
    'ArrayValue',
    'AttributeInfo',
    'Category',
    'Char',
    'Choice',
    'ChoiceValue',
    'CustomizedType',
    'CustomizedValue',
    'DynamicSlot',
    'DynamicValue',
    'Enumeration',
    'EnumerationValue',
    'FormattingMode',
    'NullableValue',
    'Selection',
    'SelectionInfo',
    'SequenceValue',
    'SimpleValue',
    'attribute',
    'is_byte_array',
    'resolve_dynamic',
    'select_category',
    'selection',
]
