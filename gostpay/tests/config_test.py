# gostpay/tests/config_test.py
import json
import logging

import pytest
from pydantic import ValidationError
from pythonjsonlogger.json import JsonFormatter

from gostpay.config import Settings
from gostpay.parser import ParserPolicy
from gostpay.telemetry import configure_logging


def test_defaults():
    s = Settings(_env_file=None)
    assert s.FORMAT_VERSION == "0001"
    assert s.PARSER_POLICY is ParserPolicy.STRICT
    assert s.DEFAULT_SEPARATOR == "|"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PARSER_POLICY", "loose")
    monkeypatch.setenv("FORMAT_VERSION", "0002")
    s = Settings(_env_file=None)
    assert s.PARSER_POLICY is ParserPolicy.LOOSE
    assert s.FORMAT_VERSION == "0002"


@pytest.mark.parametrize("field, value", [
    ("FORMAT_VERSION", "01"),
    ("FORMAT_VERSION", "00О1"),
    ("DEFAULT_SEPARATOR", "||"),
    ("DEFAULT_SEPARATOR", "="),
    ("DEFAULT_SEPARATOR", "¦"),
    ("PARSER_POLICY", "lenient"),
])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_allowed_origins():
    s = Settings(_env_file=None, ALLOWED_ORIGINS="http://a.example, http://b.example,")
    assert s.allowed_origins == ["http://a.example", "http://b.example"]


@pytest.fixture
def restore_gostpay_logger():
    logger = logging.getLogger("gostpay")
    saved = list(logger.handlers), logger.level, logger.propagate
    yield
    handlers, level, propagate = saved
    for h in list(logger.handlers):
        logger.removeHandler(h)
    for h in handlers:
        logger.addHandler(h)
    logger.setLevel(level)
    logger.propagate = propagate


def test_configure_logging(restore_gostpay_logger):
    s = Settings(_env_file=None, APP_NAME="codec-test", FORMAT_VERSION="0002", LOG_LEVEL="DEBUG")
    root_handlers = list(logging.getLogger().handlers)
    configure_logging(s)
    logger = configure_logging(s)
    assert logger.name == "gostpay"
    assert logger.level == logging.DEBUG
    assert not logger.propagate
    assert logging.getLogger().handlers == root_handlers

    json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)]
    assert len(json_handlers) == 1

    record = logging.getLogger("gostpay.parser").makeRecord(
        "gostpay.parser", logging.INFO, __file__, 1, "dropping pair %r", ("x",), None
    )
    line = json.loads(json_handlers[0].formatter.format(record))
    assert line["message"] == "dropping pair 'x'"
    assert line["name"] == "gostpay.parser"
    assert line["service"] == "codec-test"
    assert line["format_version"] == "0002"
    assert line["parser_policy"] == "strict"
