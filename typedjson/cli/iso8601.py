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

import sys

from structlog import get_logger

logger = get_logger()

TYPE_NAMES = ('date', 'time', 'datetime', 'datetz', 'timetz', 'datetimetz')


def create_parser():
    from typedjson.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('text', help='ISO 8601 string to parse')
    parser.add_argument('--type', choices=TYPE_NAMES, default='datetimetz', help='Calendar type to parse as')
    parser.add_argument('--config-yaml', type=str, help='YAML file with the generation options')
    parser.add_argument('--decimal-comma', action='store_true', help='Use "," before the milliseconds')
    parser.add_argument('--omit-colon', action='store_true', help='Write zone designators as +hhmm')
    parser.add_argument('--use-z', action='store_true', help='Write a zero offset as Z')
    parser.add_argument('--advance-midnight', action='store_true',
                        help='Read 24:00 on any date as 00:00 of the next day')
    return parser


def execute(args) -> int:
    from typedjson.exception import InvalidDateTimeFormat
    from typedjson.iso8601 import Date, DateTz, Datetime, DatetimeTz, Iso8601UtilConfiguration, Time, TimeTz
    from typedjson.iso8601 import generate, parse

    types = dict(zip(TYPE_NAMES, (Date, Time, Datetime, DateTz, TimeTz, DatetimeTz)))

    if args.config_yaml:
        configuration = Iso8601UtilConfiguration.from_yaml(filepath=args.config_yaml)
    else:
        configuration = Iso8601UtilConfiguration()
    overrides = {}
    if args.decimal_comma:
        overrides['decimal_sign_for_fractional_seconds'] = ','
    if args.omit_colon:
        overrides['omit_colon_in_zone_designator'] = True
    if args.use_z:
        overrides['use_z_for_utc_zone_designator'] = True
    if overrides:
        configuration = configuration.model_copy(update=overrides)

    type_ = types[args.type]
    try:
        value = parse(type_, args.text, advance_midnight=args.advance_midnight)
    except InvalidDateTimeFormat as e:
        logger.debug('invalid input', text=args.text, type=args.type, error=str(e))
        print(f'error: {e}', file=sys.stderr)
        return 1
    print(generate(value, configuration))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
