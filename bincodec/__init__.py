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

"""
Composable binary codecs: small codecs for literals, integers, floats, buffers and text are combined into codecs for
whole records, with no offset arithmetic and with every bound and conversion checked.
"""

from bincodec.codecs import Codec
from bincodec.serialization import Deserializer, SerializationError, Serializer
from bincodec.version import __version__

__all__ = [
    'Codec',
    'Deserializer',
    'SerializationError',
    'Serializer',
    '__version__',
]
