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
Ready-made codec instances for the common fixed-width numeric types.

The integers follow the naming `<byte order>_<type>`, `U8` and `I8` have no byte order.

>>> LE_U16.to_bytes(0x1234).hex()
'3412'
>>> BE_U16.to_bytes(0x1234).hex()
'1234'
>>> LE_F32
IEEE754Codec(LittleEndianCodec(U32))
"""

from bincodec.codecs.codec import Codec, DecodeStep, EncodeStep
from bincodec.codecs.ieee754 import IEEE754Codec
from bincodec.codecs.int import BigEndianCodec, IntCodec, IntType, LittleEndianCodec
from bincodec.codecs.length_prefixed import LengthPrefixedCodec
from bincodec.codecs.literal import LiteralCodec
from bincodec.codecs.passthrough import PassthroughCodec, SelfSerializable
from bincodec.codecs.raw import RawCodec
from bincodec.codecs.record import RecordCodec, make_record_codec
from bincodec.codecs.seq import SeqCodec, SeqNCodec
from bincodec.codecs.text import TextCodec, Windows1252Codec
from bincodec.codecs.try_as import TryAsCodec
from bincodec.codecs.tuple import TupleCodec

U8 = LittleEndianCodec(IntType.U8)
I8 = LittleEndianCodec(IntType.I8)

LE_U16 = LittleEndianCodec(IntType.U16)
LE_I16 = LittleEndianCodec(IntType.I16)
LE_U32 = LittleEndianCodec(IntType.U32)
LE_I32 = LittleEndianCodec(IntType.I32)
LE_U64 = LittleEndianCodec(IntType.U64)
LE_I64 = LittleEndianCodec(IntType.I64)

BE_U16 = BigEndianCodec(IntType.U16)
BE_I16 = BigEndianCodec(IntType.I16)
BE_U32 = BigEndianCodec(IntType.U32)
BE_I32 = BigEndianCodec(IntType.I32)
BE_U64 = BigEndianCodec(IntType.U64)
BE_I64 = BigEndianCodec(IntType.I64)

LE_F32 = IEEE754Codec(LE_U32)
LE_F64 = IEEE754Codec(LE_U64)
BE_F32 = IEEE754Codec(BE_U32)
BE_F64 = IEEE754Codec(BE_U64)

__all__ = [
    'Codec',
    'DecodeStep',
    'EncodeStep',
    'IEEE754Codec',
    'BigEndianCodec',
    'IntCodec',
    'IntType',
    'LittleEndianCodec',
    'LengthPrefixedCodec',
    'LiteralCodec',
    'PassthroughCodec',
    'SelfSerializable',
    'RawCodec',
    'RecordCodec',
    'make_record_codec',
    'SeqCodec',
    'SeqNCodec',
    'TextCodec',
    'Windows1252Codec',
    'TryAsCodec',
    'TupleCodec',
    'U8',
    'I8',
    'LE_U16',
    'LE_I16',
    'LE_U32',
    'LE_I32',
    'LE_U64',
    'LE_I64',
    'BE_U16',
    'BE_I16',
    'BE_U32',
    'BE_I32',
    'BE_U64',
    'BE_I64',
    'LE_F32',
    'LE_F64',
    'BE_F32',
    'BE_F64',
]
