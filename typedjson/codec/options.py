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

from enum import Enum, unique
from typing import Literal

from pydantic import NonNegativeInt, PositiveInt

from typedjson.iso8601.configuration import Iso8601UtilConfiguration
from typedjson.utils.pydantic import BaseModel

# nesting deeper than this is refused with RecursionLimitExceeded
DEFAULT_MAX_DEPTH: int = 32


@unique
class EncodingStyle(Enum):
    COMPACT = 'compact'
    PRETTY = 'pretty'


class EncoderOptions(BaseModel):
    """Options for `Encoder.encode`.

    The layout options only matter with the PRETTY style: the document starts `initial_indent_level` levels deep and
    every level is `spaces_per_level` spaces wide.
    """

    encoding_style: EncodingStyle = EncodingStyle.COMPACT
    initial_indent_level: NonNegativeInt = 0
    spaces_per_level: NonNegativeInt = 0

    # when disabled, empty arrays are left out of the objects that contain them
    encode_empty_arrays: bool = True

    # when enabled, null attributes are written as null even if they are not NILLABLE
    encode_null_elements: bool = False

    max_depth: PositiveInt = DEFAULT_MAX_DEPTH

    decimal_sign_for_fractional_seconds: Literal['.', ','] = '.'
    omit_colon_in_zone_designator: bool = False
    use_z_for_utc_zone_designator: bool = False

    def is_pretty(self) -> bool:
        return self.encoding_style is EncodingStyle.PRETTY

    def iso8601_configuration(self) -> Iso8601UtilConfiguration:
        return Iso8601UtilConfiguration(
            decimal_sign_for_fractional_seconds=self.decimal_sign_for_fractional_seconds,
            omit_colon_in_zone_designator=self.omit_colon_in_zone_designator,
            use_z_for_utc_zone_designator=self.use_z_for_utc_zone_designator,
        )


class DecoderOptions(BaseModel):
    """Options for `Decoder.decode`."""

    max_depth: PositiveInt = DEFAULT_MAX_DEPTH

    # when disabled, an object key that matches no attribute is a SchemaViolation instead of a logged warning
    skip_unknown_elements: bool = True

    # when enabled, 24:00 on a date other than the default date is read as 00:00 of the next day
    advance_midnight_to_next_day: bool = False
