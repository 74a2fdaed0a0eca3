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

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from bincodec.conf.settings import CodecSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'BINCODEC_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the global settings, loading them on first use.

    Settings are read from the yaml filepath in the 'BINCODEC_CONFIG_YAML' env var. If it is not set, the defaults are
    used and nothing is read from disk.
    """
    global _settings_singleton

    source = os.environ.get(CONFIG_YAML_ENV_VAR)

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    if source is None:
        settings = CodecSettings()
    else:
        logger.debug('loading settings', filepath=source)
        settings = CodecSettings.from_yaml(filepath=source)

    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, or `None` when the defaults are in use.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def reset_global_settings() -> None:
    """ Forget the loaded settings, the next call to get_global_settings() loads them again. Meant for tests.
    """
    global _settings_singleton
    _settings_singleton = None
