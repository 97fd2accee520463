import logging
from types import SimpleNamespace

import pytest

from core.llm_logger import SERVICE_QUESTION_EXTRACTION, TokenUsage, calculate_cost, log_llm_call


def test_calculate_cost_for_flash_model():
    cost = calculate_cost(1_000_000, 1_000_000, "gemini-1.5-flash")

    assert cost == pytest.approx(0.375)


def test_calculate_cost_for_unknown_model_is_zero():
    assert calculate_cost(5000, 5000, "some-other-model") == 0.0


def test_log_llm_call_writes_usage_line(caplog):
    usage = SimpleNamespace(prompt_token_count=1000, candidates_token_count=200, total_token_count=1200)

    with caplog.at_level(logging.INFO, logger="llm_usage"):
        log_llm_call(SimpleNamespace(usage_metadata=usage), "gemini-1.5-flash", SERVICE_QUESTION_EXTRACTION)

    assert "gemini-1.5-flash | question_extraction | input:1000 | output:200 | total:1200" in caplog.text


def test_log_llm_call_warns_without_usage(caplog):
    with caplog.at_level(logging.INFO, logger="llm_usage"):
        log_llm_call(SimpleNamespace(usage_metadata=None), "gemini-1.5-flash", SERVICE_QUESTION_EXTRACTION)

    assert "No usage data found" in caplog.text


def test_token_usage_fills_missing_total():
    usage = SimpleNamespace(prompt_token_count=40, candidates_token_count=None, total_token_count=None)

    assert TokenUsage.from_response(SimpleNamespace(usage_metadata=usage)) == TokenUsage(40, 0, 40)


def test_token_usage_absent_metadata():
    assert TokenUsage.from_response(SimpleNamespace()) is None


def test_calculate_cost_matches_versioned_model_names():
    assert calculate_cost(1_000_000, 0, "gemini-1.5-flash-002") == pytest.approx(0.075)
