"""
Tests for structlog configuration.
"""

import logging

import pytest
import structlog

from code128.config import configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("code128").setLevel(logging.NOTSET)
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test logger levels and output routing."""

    def test_default_is_quiet(self, restore_logging):
        configure_logging()
        assert logging.getLogger("code128").level == logging.WARNING

    def test_verbose(self, restore_logging):
        configure_logging(verbose=True)
        assert logging.getLogger("code128").level == logging.DEBUG
        assert logging.getLogger("code128.core.decoder").isEnabledFor(logging.DEBUG)

    def test_single_stderr_handler(self, restore_logging):
        configure_logging(log_json=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_lines(self, restore_logging, capsys):
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("code128.test").debug("joined")
        err = capsys.readouterr().err
        assert '"event": "joined"' in err
        assert '"logger": "code128.test"' in err
