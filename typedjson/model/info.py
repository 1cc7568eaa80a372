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

from typing import NamedTuple

from typedjson.model.formatting_mode import FormattingMode


class AttributeInfo(NamedTuple):
    """ Immutable metadata describing one attribute of a sequence.

    `name` is the key used in JSON objects, `id` is the schema identifier and `formatting_mode` is the bitmask
    described in `typedjson.model.formatting_mode`.
    """
    name: str
    id: int
    formatting_mode: int = FormattingMode.DEFAULT


class SelectionInfo(NamedTuple):
    """ Immutable metadata describing one selection (alternative) of a choice.
    """
    name: str
    id: int
    formatting_mode: int = FormattingMode.DEFAULT
