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
This module implements byte sequences as base64 JSON strings.

>>> se = Serializer.build_str_serializer()
>>> encode_base64(se, b'\\x01\\x02')
>>> se.finalize()
'"AQI="'
>>> decode_base64(Deserializer.build_str_deserializer('"AQI="'))
b'\\x01\\x02'
"""

import base64
import binascii

from typedjson.serialization import Deserializer, Serializer

from .string import decode_string, encode_string


def base64_to_bytes(text: str) -> bytes:
    """Decode standard base64 with padding, raises ValueError on anything else."""
    try:
        return base64.b64decode(text.encode('ascii'), validate=True)
    except (UnicodeEncodeError, binascii.Error) as e:
        raise ValueError(f'invalid base64 string: {text[:20]!r}') from e


def encode_base64(serializer: Serializer, data: bytes) -> None:
    encode_string(serializer, base64.b64encode(bytes(data)).decode('ascii'))


def decode_base64(deserializer: Deserializer) -> bytes:
    """Read a JSON string and decode it as base64, raises ValueError if it is a string but not base64."""
    return base64_to_bytes(decode_string(deserializer))
