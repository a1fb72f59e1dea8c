import pytest

import namesearch.logger as logging_setup
from namesearch.logger import get_logger, setup_logger


@pytest.fixture
def restore_logger():
    yield
    logging_setup._log_file_path = None
    setup_logger()


def test_relative_log_file_is_resolved_against_working_directory(tmp_path, monkeypatch, restore_logger):
    monkeypatch.chdir(tmp_path)

    setup_logger(log_file="namesearch.log", log_level="DEBUG")
    get_logger("test").info("hello from the log test")

    assert logging_setup._log_file_path == str(tmp_path / "namesearch.log")
    assert "hello from the log test" in (tmp_path / "namesearch.log").read_text(encoding="utf-8")


def test_later_setup_reuses_configured_file(tmp_path, restore_logger):
    log_file = tmp_path / "app.log"
    setup_logger(log_file=str(log_file))

    setup_logger(log_level="DEBUG")
    get_logger("test").debug("still written here")

    assert "still written here" in log_file.read_text(encoding="utf-8")
