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

from typedjson.codec.decoder import Decoder
from typedjson.codec.encoder import Encoder
from typedjson.codec.formatter import Formatter
from typedjson.codec.log import MessageLog
from typedjson.codec.options import DEFAULT_MAX_DEPTH, DecoderOptions, EncoderOptions, EncodingStyle

__all__ = [
    'DEFAULT_MAX_DEPTH',
    'Decoder',
    'DecoderOptions',
    'Encoder',
    'EncoderOptions',
    'EncodingStyle',
    'Formatter',
    'MessageLog',
]
