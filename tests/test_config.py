import logging

import pytest

from ciphersuite.core.config import DEFAULT_LOG_FORMAT, Settings, load_settings
from ciphersuite.core.logging_setup import configure_logging


def test_defaults_when_env_empty():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_format == DEFAULT_LOG_FORMAT


def test_env_overrides():
    settings = load_settings({"CIPHERSUITE_LOG_LEVEL": "debug", "CIPHERSUITE_LOG_FORMAT": "%(message)s"})
    assert settings.log_level == "DEBUG"
    assert settings.numeric_level == logging.DEBUG
    assert settings.log_format == "%(message)s"


def test_bad_level_rejected():
    with pytest.raises(ValueError):
        load_settings({"CIPHERSUITE_LOG_LEVEL": "loud"})


def test_cli_override_wins():
    assert Settings().with_overrides(log_level="info").log_level == "INFO"
    assert Settings().with_overrides(log_level=None) == Settings()


def test_configure_logging_is_idempotent():
    logger = configure_logging(Settings(log_level="INFO"))
    configure_logging(Settings(log_level="INFO"))
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
