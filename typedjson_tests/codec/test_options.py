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

from pathlib import Path

import pytest
from pydantic import ValidationError

from typedjson.codec import DEFAULT_MAX_DEPTH, DecoderOptions, EncoderOptions, EncodingStyle
from typedjson.iso8601 import Iso8601UtilConfiguration


def test_encoder_defaults() -> None:
    options = EncoderOptions()
    assert options.encoding_style is EncodingStyle.COMPACT
    assert not options.is_pretty()
    assert options.initial_indent_level == 0
    assert options.spaces_per_level == 0
    assert options.encode_empty_arrays
    assert not options.encode_null_elements
    assert options.max_depth == DEFAULT_MAX_DEPTH
    assert options.iso8601_configuration() == Iso8601UtilConfiguration()


def test_decoder_defaults() -> None:
    options = DecoderOptions()
    assert options.max_depth == DEFAULT_MAX_DEPTH
    assert options.skip_unknown_elements
    assert not options.advance_midnight_to_next_day


def test_iso8601_configuration() -> None:
    options = EncoderOptions(decimal_sign_for_fractional_seconds=',', use_z_for_utc_zone_designator=True)
    assert options.iso8601_configuration() == Iso8601UtilConfiguration(
        decimal_sign_for_fractional_seconds=',',
        use_z_for_utc_zone_designator=True,
    )


@pytest.mark.parametrize('kwargs', [
    dict(spaces_per_level=-1),
    dict(initial_indent_level=-1),
    dict(max_depth=0),
    dict(encoding_style='fancy'),
    dict(decimal_sign_for_fractional_seconds=':'),
    dict(unknown_option=True),
])
def test_encoder_invalid(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        EncoderOptions(**kwargs)


def test_options_are_frozen() -> None:
    options = DecoderOptions()
    with pytest.raises(ValidationError):
        options.max_depth = 3  # type: ignore[misc]


def test_encoder_from_yaml(tmp_path: Path) -> None:
    base = tmp_path / 'base.yml'
    base.write_text('encoding_style: pretty\nspaces_per_level: 2\nmax_depth: 10\n')
    filepath = tmp_path / 'options.yml'
    filepath.write_text('extends: base.yml\nspaces_per_level: 4\ninitial_indent_level: 1\n')

    options = EncoderOptions.from_yaml(filepath=filepath)

    assert options == EncoderOptions(
        encoding_style=EncodingStyle.PRETTY,
        spaces_per_level=4,
        initial_indent_level=1,
        max_depth=10,
    )
    assert options.is_pretty()


def test_decoder_from_yaml(tmp_path: Path) -> None:
    filepath = tmp_path / 'options.yml'
    filepath.write_text('skip_unknown_elements: false\nadvance_midnight_to_next_day: true\n')

    options = DecoderOptions.from_yaml(filepath=filepath)

    assert options == DecoderOptions(skip_unknown_elements=False, advance_midnight_to_next_day=True)


def test_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    filepath = tmp_path / 'options.yml'
    filepath.write_text('skip_unknown: false\n')

    with pytest.raises(ValidationError):
        DecoderOptions.from_yaml(filepath=filepath)


def test_json_dumpb() -> None:
    assert DecoderOptions(max_depth=5).json_dumpb() == \
        b'{"max_depth":5,"skip_unknown_elements":true,"advance_midnight_to_next_day":false}'
