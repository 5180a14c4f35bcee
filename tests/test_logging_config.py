import logging

import pytest
from textual.logging import TextualHandler

from menuboard.logging_config import setup_logging


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    package_level = logging.getLogger("menuboard").level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("menuboard").setLevel(package_level)


def test_writes_to_log_file(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "menuboard.log"

    setup_logging("DEBUG", str(log_file))
    logging.getLogger("menuboard.test").info("hello from the menu")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello from the menu" in log_file.read_text(encoding="utf-8")
    assert any(isinstance(handler, TextualHandler) for handler in logging.getLogger().handlers)


def test_unwritable_log_file_is_reported(tmp_path, restore_logging):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    recorder = RecordingHandler()
    module_logger = logging.getLogger("menuboard.logging_config")
    module_logger.addHandler(recorder)
    try:
        setup_logging("INFO", str(blocker / "menuboard.log"))
    finally:
        module_logger.removeHandler(recorder)

    root_handlers = logging.getLogger().handlers
    assert not any(isinstance(handler, logging.FileHandler) for handler in root_handlers)
    warnings = [record for record in recorder.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "unavailable" in warnings[0].getMessage()


def test_unknown_level_falls_back_to_info(tmp_path, restore_logging):
    setup_logging("CHATTY", str(tmp_path / "menuboard.log"))

    assert logging.getLogger("menuboard").level == logging.INFO
