import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from bincodec.codecs import RawCodec, Windows1252Codec
from bincodec.conf.get_settings import CONFIG_YAML_ENV_VAR, get_global_settings
from bincodec.log import LoggingOutput, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    structlog.reset_defaults()
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    logging.getLogger().handlers.clear()
    logging.getLogger().setLevel(logging.WARNING)


def test_pretty_output(capsys) -> None:
    setup_logging(debug=True, logging_output=LoggingOutput.PRETTY, cache_loggers=False)
    structlog.get_logger('bincodec.test').debug('hello', answer=42)
    err = capsys.readouterr().err
    assert 'hello' in err
    assert 'answer=42' in err


def test_json_output(capsys) -> None:
    setup_logging(debug=True, logging_output=LoggingOutput.JSON, cache_loggers=False)
    structlog.get_logger('bincodec.test').info('hello', answer=42)
    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event['event'] == 'hello'
    assert event['answer'] == 42
    assert event['level'] == 'info'


def test_debug_is_filtered_by_default(capsys) -> None:
    setup_logging(debug=False, logging_output=LoggingOutput.PRETTY, cache_loggers=False)
    Windows1252Codec(RawCodec()).from_bytes(b'quiet')
    assert 'decoded text' not in capsys.readouterr().err


def test_null_output(capsys) -> None:
    setup_logging(debug=True, logging_output=LoggingOutput.NULL, cache_loggers=False)
    structlog.get_logger('bincodec.test').info('hello')
    assert capsys.readouterr().err == ''


def test_defaults_from_settings(tmp_path, monkeypatch, capsys) -> None:
    filepath = tmp_path / 'bincodec.yml'
    filepath.write_text('LOG_DEBUG: true\nLOG_JSON: true\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))
    assert get_global_settings().LOG_JSON
    setup_logging(cache_loggers=False)
    Windows1252Codec(RawCodec()).from_bytes(b'loud')
    event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert event['event'] == 'decoded text'
    assert event['text'] == 'loud'


def test_settings_load_is_logged(tmp_path, monkeypatch) -> None:
    filepath = tmp_path / 'bincodec.yml'
    filepath.write_text('MAX_BYTES: 100\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))
    with capture_logs() as log_list:
        get_global_settings()
    assert log_list == [{'event': 'loading settings', 'log_level': 'debug', 'filepath': str(filepath)}]
