import pytest

from bincodec.serialization.exceptions import ConversionOverflowError
from bincodec.utils.int import USIZE_MAX, int_bounds, try_convert_int, try_into_usize
from bincodec.utils.yaml import deep_merge, dict_from_extended_yaml, dict_from_yaml


@pytest.mark.parametrize('length, signed, bounds', [
    (1, False, (0, 255)),
    (1, True, (-128, 127)),
    (2, False, (0, 65535)),
    (2, True, (-32768, 32767)),
    (4, False, (0, 4294967295)),
    (4, True, (-2147483648, 2147483647)),
    (8, False, (0, 18446744073709551615)),
    (8, True, (-9223372036854775808, 9223372036854775807)),
])
def test_int_bounds(length: int, signed: bool, bounds: tuple[int, int]) -> None:
    assert int_bounds(length=length, signed=signed) == bounds


def test_int_bounds_invalid_length() -> None:
    with pytest.raises(ValueError):
        int_bounds(length=0, signed=False)


def test_try_convert_int() -> None:
    assert try_convert_int(-128, length=1, signed=True) == -128
    with pytest.raises(ConversionOverflowError) as exc_info:
        try_convert_int(-129, length=1, signed=True)
    assert exc_info.value.value == -129
    assert exc_info.value.min_value == -128
    assert exc_info.value.max_value == 127
    # it is also an OverflowError
    with pytest.raises(OverflowError):
        try_convert_int(256, length=1, signed=False)


def test_try_into_usize() -> None:
    assert try_into_usize(0) == 0
    assert try_into_usize(USIZE_MAX) == USIZE_MAX
    with pytest.raises(ConversionOverflowError):
        try_into_usize(-1)
    with pytest.raises(ConversionOverflowError):
        try_into_usize(USIZE_MAX + 1)


def test_deep_merge() -> None:
    first = {'a': 1, 'b': {'c': 2, 'd': 3}}
    deep_merge(first, {'b': {'d': 4}, 'e': 5})
    assert first == {'a': 1, 'b': {'c': 2, 'd': 4}, 'e': 5}


def test_dict_from_yaml(tmp_path) -> None:
    filepath = tmp_path / 'settings.yml'
    filepath.write_text('MAX_BYTES: 10\nLOG_DEBUG: true\n')
    assert dict_from_yaml(filepath=filepath) == {'MAX_BYTES': 10, 'LOG_DEBUG': True}


def test_dict_from_yaml_empty_file(tmp_path) -> None:
    filepath = tmp_path / 'empty.yml'
    filepath.write_text('')
    assert dict_from_yaml(filepath=filepath) == {}


def test_dict_from_yaml_invalid(tmp_path) -> None:
    with pytest.raises(ValueError):
        dict_from_yaml(filepath=tmp_path / 'missing.yml')

    filepath = tmp_path / 'list.yml'
    filepath.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        dict_from_yaml(filepath=filepath)


def test_dict_from_extended_yaml(tmp_path) -> None:
    (tmp_path / 'base.yml').write_text('MAX_BYTES: 10\nMAX_SEQUENCE_LENGTH: 5\n')
    (tmp_path / 'child.yml').write_text('extends: base.yml\nMAX_SEQUENCE_LENGTH: 7\n')
    result = dict_from_extended_yaml(filepath=tmp_path / 'child.yml')
    assert result == {'MAX_BYTES': 10, 'MAX_SEQUENCE_LENGTH': 7}


def test_dict_from_extended_yaml_self_reference(tmp_path) -> None:
    (tmp_path / 'loop.yml').write_text('extends: loop.yml\n')
    with pytest.raises(ValueError):
        dict_from_extended_yaml(filepath=tmp_path / 'loop.yml')
