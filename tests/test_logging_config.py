"""Tests for the structured logging helpers."""

import logging

from app_state import AppState, View
from logging_config import StructuredFormatter, get_logger, log_with_context


class TestLogWithContext:
    def test_record_names_the_calling_function(self, caplog):
        logger = get_logger("tests.structured")
        with caplog.at_level(logging.INFO, logger="tests.structured"):
            log_with_context(logger, logging.INFO, "submission scored", total_score=100)

        record = caplog.records[-1]
        assert record.funcName == "test_record_names_the_calling_function"
        assert record.module == "test_logging_config"
        assert record.extra_data == {"total_score": 100}

    def test_formatter_renders_caller_and_context(self, caplog):
        logger = get_logger("tests.structured")
        with caplog.at_level(logging.INFO, logger="tests.structured"):
            log_with_context(logger, logging.INFO, "submission incomplete", stage="questionnaire")

        line = StructuredFormatter().format(caplog.records[-1])
        assert "function=test_formatter_renders_caller_and_context" in line
        assert "message=submission incomplete" in line
        assert "stage=questionnaire" in line

    def test_submit_events_are_attributed_to_submit(self, caplog):
        state = AppState()
        state.flow.jump(View.QUESTIONNAIRE)
        with caplog.at_level(logging.INFO, logger="app_state"):
            state.submit()

        record = next(r for r in caplog.records if r.getMessage() == "submission incomplete")
        assert record.module == "app_state"
        assert record.funcName == "submit"
