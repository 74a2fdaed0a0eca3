import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'bincodec.codecs',
    'bincodec.codecs.ieee754',
    'bincodec.codecs.int',
    'bincodec.codecs.length_prefixed',
    'bincodec.codecs.literal',
    'bincodec.codecs.raw',
    'bincodec.codecs.record',
    'bincodec.codecs.seq',
    'bincodec.codecs.text',
    'bincodec.codecs.try_as',
    'bincodec.codecs.tuple',
    'bincodec.compound_encoding.length_prefixed',
    'bincodec.compound_encoding.sequence',
    'bincodec.compound_encoding.tuple',
    'bincodec.encoding.ieee754',
    'bincodec.encoding.int',
    'bincodec.encoding.literal',
    'bincodec.encoding.raw',
    'bincodec.serialization.adapters.max_bytes',
    'bincodec.text_table',
    'bincodec.utils.int',
    'bincodec.utils.yaml',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
