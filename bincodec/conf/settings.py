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
from typing import Optional, Union

from pydantic import field_validator

from bincodec.utils import pydantic


class CodecSettings(pydantic.BaseModel):
    # Upper bound of bytes written by `Codec.to_bytes` or read by `Codec.from_bytes`, `None` means unbounded
    MAX_BYTES: Optional[int] = None

    # Default limit on the count decoded by `LengthPrefixed` codecs that don't set their own `max_length`
    MAX_SEQUENCE_LENGTH: Optional[int] = None

    # Defaults for `bincodec.log.setup_logging`
    LOG_DEBUG: bool = False
    LOG_JSON: bool = False

    @field_validator('MAX_BYTES', 'MAX_SEQUENCE_LENGTH')
    @classmethod
    def _check_non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError('limit cannot be negative')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        from bincodec.utils.yaml import dict_from_extended_yaml
        settings_dict = dict_from_extended_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
