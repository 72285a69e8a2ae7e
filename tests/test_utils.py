import logging

import pytest
import pythonjsonlogger.json
from rich.logging import RichHandler

from optkit.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli():
    setup_logging(mode="cli", console_log_level=logging.INFO)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.INFO


def test_setup_logging_json(monkeypatch):
    monkeypatch.setenv("OPTKIT_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, pythonjsonlogger.json.JsonFormatter)


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "optkit.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    handlers = logging.getLogger().handlers
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)
    logging.getLogger("optkit").debug("hello from optkit")
    for handler in handlers:
        handler.flush()
    assert "hello from optkit" in log_file.read_text()


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
