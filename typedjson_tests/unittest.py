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

import unittest
from typing import Any, TypeVar
from unittest import main as ut_main

from structlog import get_logger

from typedjson.codec import Decoder, DecoderOptions, Encoder, EncoderOptions

logger = get_logger()
main = ut_main

T = TypeVar('T')


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.log = logger.new()
        self.encoder = Encoder()
        self.decoder = Decoder()

    def encode(self, value: Any, **options: Any) -> str:
        """Encode `value` to a string, `options` are passed on to EncoderOptions."""
        return self.encoder.encode_to_string(value, EncoderOptions(**options))

    def decode(self, text: str, target: T, **options: Any) -> T:
        """Decode `text` into `target`, `options` are passed on to DecoderOptions."""
        return self.decoder.decode(text, target, DecoderOptions(**options))

    def assertEncodes(self, value: Any, expected: str, **options: Any) -> None:
        self.assertEqual(self.encode(value, **options), expected)

    def assertRoundTrip(self, value: Any, target: Any, **options: Any) -> None:
        """Encode `value`, decode the result into `target` and check that it equals `value`."""
        text = self.encode(value, **options)
        self.log.debug('round trip', text=text)
        self.assertEqual(self.decode(text, target), value)
