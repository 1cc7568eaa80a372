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

from typing import Literal

from typedjson.utils.pydantic import BaseModel


class Iso8601UtilConfiguration(BaseModel):
    """Options that only affect how ISO-8601 strings are generated, parsing accepts every variant."""

    # '.' or ',' between seconds and milliseconds
    decimal_sign_for_fractional_seconds: Literal['.', ','] = '.'

    # write zone designators as +hhmm instead of +hh:mm
    omit_colon_in_zone_designator: bool = False

    # write a zero offset as Z instead of +00:00
    use_z_for_utc_zone_designator: bool = False


DEFAULT_CONFIGURATION = Iso8601UtilConfiguration()
