"""Tests for configuration and logging helpers."""

import logging

import otpcore
from otpcore import config
from otpcore.log import get_logger


def test_getenv_prefers_first_non_empty(monkeypatch):
    """Test environment lookup with aliases."""
    monkeypatch.setenv("OTPCORE_TEST_A", "")
    monkeypatch.setenv("OTPCORE_TEST_B", "value")

    assert config.getenv("OTPCORE_TEST_A", None, "OTPCORE_TEST_B") == "value"
    assert config.getenv("OTPCORE_TEST_MISSING", "fallback") == "fallback"


def test_get_logger_level_from_environment(monkeypatch):
    """The log level defaults to OTPCORE_LOG_LEVEL."""
    monkeypatch.setenv("OTPCORE_LOG_LEVEL", "debug")

    logger = get_logger("otpcore.tests.env")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert get_logger("otpcore.tests.env") is logger
    assert len(logger.handlers) == 1


def test_get_logger_explicit_level(monkeypatch):
    """An explicit level overrides the environment."""
    monkeypatch.setenv("OTPCORE_LOG_LEVEL", "not-a-level")

    assert get_logger("otpcore.tests.explicit", logging.INFO).level == logging.INFO
    assert get_logger("otpcore.tests.default").level == logging.WARNING


def test_package_exports():
    """The library surface is importable from the package root."""
    assert otpcore.generate_hotp_string(0, "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ") == "755224"
    assert otpcore.Digits(8) is otpcore.Digits.EIGHT
    assert otpcore.MAX_COUNTER == 2**64 - 1
    assert set(otpcore.__all__) <= set(dir(otpcore))


def test_get_logger_ignores_non_level_names(monkeypatch):
    """Names on the logging module that are not levels fall back to WARNING."""
    monkeypatch.setenv("OTPCORE_LOG_LEVEL", "basicconfig")

    assert get_logger("otpcore.tests.not_a_level").level == logging.WARNING
