"""
Unit Tests for Logging Setup
"""

import json
import logging

import pytest
from pydantic import ValidationError

from typedconf import LoggingSettings, create_json_config
from typedconf.utils.logger import JSONFormatter, TextFormatter, get_logger, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger('typedconf')
    handlers, level = logger.handlers[:], logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord('typedconf.test', logging.INFO, __file__, 10, 'hello %s', ('world',), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data['message'] == 'hello world'
        assert data['level'] == 'INFO'
        assert data['logger'] == 'typedconf.test'
        assert data['timestamp'].endswith('+00:00')

    def test_extra_fields_merged(self):
        data = json.loads(JSONFormatter().format(make_record(path='/tmp/x.json', keys=3)))

        assert data['path'] == '/tmp/x.json'
        assert data['keys'] == 3

    def test_non_serializable_extra(self, tmp_path):
        data = json.loads(JSONFormatter().format(make_record(path=tmp_path)))
        assert data['path'] == str(tmp_path)


def test_text_formatter():
    output = TextFormatter().format(make_record())
    assert 'typedconf.test - hello world' in output


def test_setup_logging_writes_file(tmp_path, restore_logger):
    log_file = tmp_path / 'logs' / 'typedconf.log'
    setup_logging(level='DEBUG', log_file=str(log_file), console=False)

    get_logger('typedconf.test').info('written', extra={'setting': 'PORT'})
    for handler in restore_logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert any(line['message'] == 'written' and line['setting'] == 'PORT' for line in lines)


def test_load_is_logged_at_debug(tmp_path, caplog):
    path = tmp_path / 'app.json'
    path.write_text('{"a": 1}')

    with caplog.at_level(logging.DEBUG, logger='typedconf'):
        create_json_config(path)

    assert any('Loaded JSON configuration' in r.getMessage() for r in caplog.records)


class TestLoggingSettings:

    def test_normalizes_values(self):
        settings = LoggingSettings(level='debug', format='TEXT')
        assert settings.level == 'DEBUG'
        assert settings.format == 'text'

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level='LOUD')

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            LoggingSettings(format='xml')

    def test_apply(self, restore_logger):
        logger = LoggingSettings(level='warning', format='text').apply()

        assert logger is restore_logger
        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter, TextFormatter)
