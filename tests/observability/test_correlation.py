"""Tests for correlation ID tracking and logging helpers."""

import logging

from researcher.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from researcher.observability.log_utils import safe_log_value
from researcher.observability.logger import CorrelationIdFilter, configure_logging


class TestCorrelationId:
    def test_set_and_get(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_generates_when_missing(self) -> None:
        generated = set_correlation_id()
        assert len(generated) == 36
        clear_correlation_id()

    def test_filter_injects_id(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-2")
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            clear_correlation_id()
        assert record.correlation_id == "req-2"

    def test_filter_placeholder_outside_request(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"


class TestSafeLogValue:
    def test_truncates_long_strings(self) -> None:
        value = safe_log_value("x" * 600, max_length=10)
        assert value.startswith("x" * 10)
        assert "600 total" in value

    def test_collections_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"


def test_configure_logging_replaces_handlers() -> None:
    root = logging.getLogger()
    original = root.handlers[:]
    original_level = root.level
    try:
        configure_logging("DEBUG")
        configure_logging("WARNING")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in original:
            root.addHandler(handler)
        root.setLevel(original_level)
