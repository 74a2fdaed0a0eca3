"""
Layouts built only by composing codecs, in the way a file format would be described.
"""

from dataclasses import dataclass

import pytest

from bincodec.codecs import (
    BE_U32,
    LE_F32,
    LE_U16,
    LE_U32,
    U8,
    LengthPrefixedCodec,
    LiteralCodec,
    RawCodec,
    RecordCodec,
    SeqCodec,
    SeqNCodec,
    TryAsCodec,
    TupleCodec,
    Windows1252Codec,
    make_record_codec,
)
from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.exceptions import OutOfDataError, ValueMismatchError


@dataclass
class Bone:
    name: str
    parent: int
    rotation: tuple[float, float, float, float]


@dataclass
class Model:
    version: int
    bones: list[Bone]
    triangles: list[tuple[int, int, int]]
    payload: bytes


BONE = make_record_codec(
    Bone,
    name=Windows1252Codec(LengthPrefixedCodec(U8, U8)),
    parent=LE_U16,
    rotation=TupleCodec(4, LE_F32),
)

MODEL = RecordCodec(Model, [
    (None, LiteralCodec(b'MDL\x00')),
    ('version', BE_U32),
    ('bones', LengthPrefixedCodec(TryAsCodec(LE_U32), BONE)),
    ('triangles', LengthPrefixedCodec(LE_U16, TupleCodec(3, LE_U16))),
    ('payload', RawCodec()),
])


def _model() -> Model:
    return Model(
        version=2,
        bones=[
            Bone(name='root', parent=0xffff, rotation=(0.0, 0.0, 0.0, 1.0)),
            Bone(name='bras€', parent=0, rotation=(0.5, 0.5, 0.5, 0.5)),
        ],
        triangles=[(0, 1, 2), (2, 1, 3)],
        payload=b'\xde\xad\xbe\xef',
    )


def test_model_round_trip() -> None:
    model = _model()
    data = MODEL.to_bytes(model)
    assert data.startswith(b'MDL\x00\x00\x00\x00\x02\x02\x00\x00\x00\x04root\xff\xff')
    assert data.endswith(b'\xde\xad\xbe\xef')
    assert MODEL.from_bytes(data) == model
    assert MODEL.to_bytes(MODEL.from_bytes(data)) == data


def test_model_wrong_magic() -> None:
    data = bytearray(MODEL.to_bytes(_model()))
    data[3] = 0x01
    with pytest.raises(ValueMismatchError) as exc_info:
        MODEL.from_bytes(data)
    assert exc_info.value.index == 3


def test_errors_from_nested_codecs_are_not_wrapped() -> None:
    # cut the data in the middle of the second bone's rotation
    data = MODEL.to_bytes(_model())
    with pytest.raises(OutOfDataError) as exc_info:
        MODEL.from_bytes(data[:45])
    assert type(exc_info.value) is OutOfDataError
    assert exc_info.value.obtained == 2
    assert exc_info.value.expected == 4


def test_nested_sequences() -> None:
    codec = SeqNCodec(2, LengthPrefixedCodec(U8, LE_U16))
    value = [[1, 2], []]
    data = codec.to_bytes(value)
    assert data == b'\x02\x01\x00\x02\x00\x00'
    assert codec.from_bytes(data) == value


def test_sequence_then_more_data() -> None:
    header = SeqNCodec(3, U8, builder=bytes)
    se = Serializer.build_bytes_serializer()
    header.encode(se, b'abc')
    SeqCodec(LE_U16).encode(se, [1, 2])
    de = Deserializer.build_bytes_deserializer(bytes(se.finalize()))
    assert header.decode(de) == b'abc'
    assert SeqCodec(LE_U16).decode(de) == [1, 2]
    de.finalize()
