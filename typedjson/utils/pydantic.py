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
from typing import Union

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from typing_extensions import Self


class BaseModel(PydanticBaseModel):
    """Substitute for pydantic's BaseModel.
    This class defines a project BaseModel to be used instead of pydantic's, setting stricter global configurations.
    Other configurations can be set on a case by case basis.

    Read: https://docs.pydantic.dev/latest/concepts/config/
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> Self:
        """Takes a filepath to a yaml file and returns a validated model instance.

        The yaml file may extend another yaml file through the `extends` key, see `dict_from_extended_yaml`.
        """
        from typedjson.utils.yaml import dict_from_extended_yaml
        return cls.model_validate(dict_from_extended_yaml(filepath=filepath))

    def json_dumpb(self) -> bytes:
        """Utility method for converting a Model into bytes representation of a JSON."""
        return self.model_dump_json().encode('utf-8')
