#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import os
from pathlib import Path
from typing import Any, Union

import yaml

_EXTENDS_KEY = 'extends'


def deep_merge(first: dict, second: dict) -> None:
    """
    Recursively merges two dicts, altering the first one in place.

    >>> base = dict(MAX_BYTES=1024, nested=dict(a=1, b=2))
    >>> deep_merge(base, dict(nested=dict(b=3), LOG_DEBUG=True))
    >>> base == dict(MAX_BYTES=1024, nested=dict(a=1, b=3), LOG_DEBUG=True)
    True
    """
    for key in second:
        if key in first and isinstance(first[key], dict) and isinstance(second[key], dict):
            deep_merge(first[key], second[key])
        else:
            first[key] = second[key]


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Takes a filepath to a yaml file and returns a dictionary with its contents."""
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}

    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """
    Takes a filepath to a yaml file and returns a dictionary with its contents.
    Supports extending another yaml file (relative to the first one) via the 'extends' key in the file.

    Note: the 'extends' key is reserved and will not be present in the returned dictionary.
    """
    extension_dict = dict_from_yaml(filepath=filepath)
    base_file = extension_dict.pop(_EXTENDS_KEY, None)

    if not base_file:
        return extension_dict

    base_filepath = Path(filepath).parent / str(base_file)
    if base_filepath.resolve() == Path(filepath).resolve():
        raise ValueError(f"'{filepath}' cannot extend itself")

    base_dict = dict_from_extended_yaml(filepath=base_filepath)
    deep_merge(base_dict, extension_dict)
    return base_dict
