# core/llm_logger.py
"""Token usage and cost log for Gemini calls, written to <LOGS_DIR>/llm_usage.log."""
import os
import logging
from functools import lru_cache
from typing import Any, NamedTuple, Optional

from .config import LOGS_DIR

SERVICE_QUESTION_EXTRACTION = "question_extraction"

# USD per 1M tokens as (input, output), matched by substring of the model name
GEMINI_PRICES_PER_1M = {
    "gemini-1.5-flash": (0.075, 0.30),
}


class TokenUsage(NamedTuple):
    prompt_tokens: int
    output_tokens: int
    total_tokens: int

    @classmethod
    def from_response(cls, response: Any) -> Optional["TokenUsage"]:
        """Reads Gemini's usage_metadata, or None when the response has none."""
        usage = getattr(response, "usage_metadata", None)
        if not usage:
            return None
        prompt = getattr(usage, "prompt_token_count", None) or 0
        output = getattr(usage, "candidates_token_count", None) or 0
        total = getattr(usage, "total_token_count", None) or (prompt + output)
        return cls(prompt, output, total)


@lru_cache(maxsize=None)
def get_usage_logger() -> logging.Logger:
    logger = logging.getLogger("llm_usage")
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        os.makedirs(LOGS_DIR, exist_ok=True)
        handler = logging.FileHandler(os.path.join(LOGS_DIR, "llm_usage.log"), encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    return logger


def calculate_cost(input_tokens: int, output_tokens: int, model_name: str) -> float:
    """Estimated USD cost of one call; 0.0 for models without a price entry."""
    name = model_name.lower()
    for model_key, (input_price, output_price) in GEMINI_PRICES_PER_1M.items():
        if model_key in name:
            return (input_tokens * input_price + output_tokens * output_price) / 1_000_000
    return 0.0


def log_llm_call(response: Any, model_name: str, service_name: str = SERVICE_QUESTION_EXTRACTION):
    """Appends `model | service | input | output | total | cost` for one Gemini response."""
    usage_log = get_usage_logger()
    try:
        usage = TokenUsage.from_response(response)
        if usage is None:
            usage_log.warning(f"No usage data found for {service_name} call")
            return

        cost = calculate_cost(usage.prompt_tokens, usage.output_tokens, model_name)
        usage_log.info(
            f"{model_name} | {service_name} | input:{usage.prompt_tokens} | output:{usage.output_tokens} | "
            f"total:{usage.total_tokens} | cost:${cost:.5f}"
        )
    except Exception as e:
        # Usage accounting must never break an extraction
        usage_log.error(f"Error logging LLM call: {e}")
