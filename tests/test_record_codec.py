from dataclasses import dataclass
from typing import NamedTuple

import pytest

from bincodec.codecs import LE_F32, LE_U16, LE_U32, U8, LiteralCodec, RecordCodec, TupleCodec, make_record_codec
from bincodec.serialization.exceptions import OutOfDataError, ValueMismatchError


@dataclass
class Vertex:
    position: tuple[float, float, float]
    color: int


class Span(NamedTuple):
    start: int
    end: int


def test_record_round_trip() -> None:
    codec = make_record_codec(Vertex, position=TupleCodec(3, LE_F32), color=LE_U32)
    value = Vertex(position=(1.0, -2.0, 0.5), color=0xff00ff00)
    data = codec.to_bytes(value)
    assert len(data) == 16
    assert data[12:] == b'\x00\xff\x00\xff'
    assert codec.from_bytes(data) == value
    assert codec.field_names == ('position', 'color')


def test_record_with_anonymous_fields() -> None:
    codec = RecordCodec(Span, [
        (None, LiteralCodec(b'SP')),
        ('start', LE_U16),
        ('end', LE_U16),
        (None, LiteralCodec(b'\x00')),
    ])
    data = codec.to_bytes(Span(1, 2))
    assert data == b'SP\x01\x00\x02\x00\x00'
    assert codec.from_bytes(data) == Span(1, 2)
    with pytest.raises(ValueMismatchError):
        codec.from_bytes(b'SP\x01\x00\x02\x00\x01')
    with pytest.raises(OutOfDataError):
        codec.from_bytes(b'SP\x01\x00')


def test_record_type_check() -> None:
    codec = RecordCodec(Span, [('start', U8), ('end', U8)])
    with pytest.raises(TypeError):
        codec.to_bytes((1, 2))  # type: ignore[arg-type]


def test_record_construction_errors() -> None:
    with pytest.raises(ValueError):
        RecordCodec(Span, [('start', U8), ('start', U8)])
    with pytest.raises(TypeError):
        RecordCodec(Span, [('start', int)])  # type: ignore[list-item]
    with pytest.raises(TypeError):
        make_record_codec(Span, start=U8, end=U8)  # type: ignore[type-var]
    with pytest.raises(TypeError):
        make_record_codec(Vertex, color=U8)
    with pytest.raises(TypeError):
        make_record_codec(Vertex, position=TupleCodec(3, LE_F32), color=U8, alpha=U8)
