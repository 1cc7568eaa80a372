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
Formatting modes are hints attached to each attribute of a sequence and to each selection of a choice.

A formatting mode is a bitmask made of two independent parts:

- the low bits (`TYPE_MASK`) hold the schema type hint, exactly one of DEFAULT, DEC, HEX, BASE64 or TEXT;
- the higher bits (`FLAGS_MASK`) hold flags that can be combined freely.

The two parts never overlap:

>>> FormattingMode.TYPE_MASK & FormattingMode.FLAGS_MASK
0
>>> mode = FormattingMode.BASE64 | FormattingMode.NILLABLE | FormattingMode.LIST
>>> type_hint(mode) == FormattingMode.BASE64
True
>>> is_nillable(mode), is_untagged(mode)
(True, False)
"""

from typing import Final


class FormattingMode:
    # schema type hint (mutually exclusive)
    DEFAULT: Final[int] = 0x0
    DEC: Final[int] = 0x1
    HEX: Final[int] = 0x2
    BASE64: Final[int] = 0x3
    TEXT: Final[int] = 0x4
    TYPE_MASK: Final[int] = 0x7

    # flags
    UNTAGGED: Final[int] = 0x00010000
    ATTRIBUTE: Final[int] = 0x00020000
    SIMPLE_CONTENT: Final[int] = 0x00040000
    NILLABLE: Final[int] = 0x00080000
    LIST: Final[int] = 0x00100000
    FLAGS_MASK: Final[int] = 0x001F0000


_TYPE_HINTS = frozenset({
    FormattingMode.DEFAULT,
    FormattingMode.DEC,
    FormattingMode.HEX,
    FormattingMode.BASE64,
    FormattingMode.TEXT,
})


def check_formatting_mode(mode: int) -> None:
    """Raise a ValueError if `mode` has bits outside of the known masks or an unknown type hint."""
    if mode & ~(FormattingMode.TYPE_MASK | FormattingMode.FLAGS_MASK):
        raise ValueError(f'unknown formatting mode bits: {mode:#x}')
    if mode & FormattingMode.TYPE_MASK not in _TYPE_HINTS:
        raise ValueError(f'unknown formatting type hint: {mode & FormattingMode.TYPE_MASK:#x}')


def type_hint(mode: int) -> int:
    return mode & FormattingMode.TYPE_MASK


def is_untagged(mode: int) -> bool:
    return bool(mode & FormattingMode.UNTAGGED)


def is_nillable(mode: int) -> bool:
    return bool(mode & FormattingMode.NILLABLE)


def is_list(mode: int) -> bool:
    return bool(mode & FormattingMode.LIST)
