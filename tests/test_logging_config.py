"""Tests for the logging formatters and setup."""

import json
import logging

import pytest

from diddoc_core.logging_config import _HumanFormatter, _JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg="hello", **extra):
    record = logging.LogRecord("diddoc_document", logging.INFO, __file__, 1, msg, (), None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


class TestJSONFormatter:
    def test_fields(self):
        out = json.loads(_JSONFormatter().format(_record()))
        assert out["level"] == "INFO"
        assert out["logger"] == "diddoc_document"
        assert out["msg"] == "hello"
        assert "did" not in out

    def test_did_extra(self):
        out = json.loads(_JSONFormatter().format(_record(did="did:example:123")))
        assert out["did"] == "did:example:123"


class TestHumanFormatter:
    def test_includes_subject(self):
        line = _HumanFormatter().format(_record(did="did:example:123"))
        assert "diddoc_document <did:example:123>: hello" in line

    def test_without_subject(self):
        line = _HumanFormatter().format(_record())
        assert "diddoc_document: hello" in line


class TestSetupLogging:
    def test_console_handler(self, restore_root_logger):
        setup_logging(level="DEBUG", fmt="json")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, _JSONFormatter)

    def test_file_handler_is_json(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "diddoc.log"
        setup_logging(fmt="human", log_file=str(log_file))
        root = restore_root_logger
        assert len(root.handlers) == 2
        assert isinstance(root.handlers[0].formatter, _HumanFormatter)
        assert isinstance(root.handlers[1].formatter, _JSONFormatter)
        root.handlers[1].close()
        assert log_file.parent.is_dir()

    def test_unknown_format(self, restore_root_logger):
        with pytest.raises(ValueError):
            setup_logging(fmt="xml")
