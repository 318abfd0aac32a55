import logging

import pytest

from logger import setup_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_records_go_to_log_file(tmp_path, restore_root):
    log_path = tmp_path / "greg.log"
    handler = setup_logging("info", str(log_path))
    logging.getLogger("greg.test").info("hello %s", "file")
    handler.flush()
    assert "[INFO] greg.test: hello file" in log_path.read_text()
    assert restore_root.level == logging.INFO


def test_repeated_setup_replaces_handler(tmp_path, restore_root):
    first = setup_logging("WARNING", str(tmp_path / "a.log"))
    second = setup_logging("WARNING", str(tmp_path / "b.log"))
    assert first not in restore_root.handlers
    assert second in restore_root.handlers


def test_unknown_level_falls_back_to_warning(tmp_path, restore_root):
    setup_logging("chatty", str(tmp_path / "greg.log"))
    assert restore_root.level == logging.WARNING


def test_unwritable_path_uses_null_handler(tmp_path, restore_root):
    handler = setup_logging("DEBUG", str(tmp_path / "no-dir" / "greg.log"))
    assert isinstance(handler, logging.NullHandler)
