"""Tests for logging helpers"""
import logging

from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging


def test_get_logger_is_cached():
    assert get_logger("storefront.test") is get_logger("storefront.test")


def test_sanitize_id():
    assert sanitize_id_for_logging(None) == "N/A"
    assert sanitize_id_for_logging("0123456789abcdef") == "01234567"


def test_sanitize_string_escapes_newlines():
    assert sanitize_string_for_logging("a\nb") == "a\\nb"
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."


def test_sanitize_id_escapes_before_truncating():
    assert sanitize_id_for_logging("ab\ncdefghij") == "ab\\ncdef"


def test_http_client_loggers_are_quiet():
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("hpack").level == logging.WARNING
