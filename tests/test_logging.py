import logging

from text_to_color.app import create_app
from text_to_color.config import Settings
from text_to_color.utils.logging import ROOT_LOGGER, get_logger, set_log_level


def test_module_loggers_share_package_handler():
    log = get_logger("text_to_color.cache")
    root = logging.getLogger(ROOT_LOGGER)
    assert log.propagate
    assert len(root.handlers) == 1
    get_logger("text_to_color.service")
    assert len(root.handlers) == 1


def test_create_app_applies_log_level(tmp_path):
    try:
        create_app(Settings(database_url=f"sqlite:///{tmp_path / 'x.db'}", log_level="warning", use_mock_openai=True))
        assert logging.getLogger(ROOT_LOGGER).level == logging.WARNING
    finally:
        set_log_level("INFO")
