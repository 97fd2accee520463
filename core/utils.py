import json
import logging
import mimetypes
from pathlib import Path
from typing import Any, List, Optional

from .models import MalformedQuestionsError, Question

logger = logging.getLogger(__name__)

FENCE_OPENERS = ("```json", "```")
FENCE_CLOSER = "```"

_MIME_BY_EXTENSION = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def strip_code_fences(text: str) -> str:
    """
    Remove leading ```json / ``` and trailing ``` markers from model output.

    Markers are removed until none remain at either end, so applying this
    twice gives the same result as applying it once.
    """
    cleaned = (text or "").strip()
    while True:
        previous = cleaned
        for opener in FENCE_OPENERS:
            if cleaned.startswith(opener):
                cleaned = cleaned[len(opener):].lstrip()
                break
        if cleaned.endswith(FENCE_CLOSER):
            cleaned = cleaned[:-len(FENCE_CLOSER)].rstrip()
        if cleaned == previous:
            return cleaned


def parse_questions(items: Any) -> List[Question]:
    """Map a decoded JSON array onto Question objects."""
    if not isinstance(items, list):
        raise MalformedQuestionsError(f"Expected a JSON array of questions, got {type(items).__name__}")

    questions = [Question.from_dict(item) for item in items]
    for index, question in enumerate(questions, 1):
        correct_count = len(question.correct_options)
        if correct_count != 1:
            logger.warning(f"{format_question_label(index)} has {correct_count} correct options")
    return questions


def parse_questions_json(text: str) -> List[Question]:
    """Strip markdown fences from model text and parse it as a list of questions."""
    cleaned = strip_code_fences(text)
    try:
        items = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedQuestionsError(f"Response is not valid JSON: {e}") from e
    return parse_questions(items)


def get_image_mime_type(filename: str, declared: Optional[str] = None) -> str:
    """Determine MIME type from the upload's declared type, then its extension."""
    if declared and declared.startswith("image/"):
        return declared
    ext = Path(filename or "").suffix.lower()
    if ext in _MIME_BY_EXTENSION:
        return _MIME_BY_EXTENSION[ext]
    guessed, _ = mimetypes.guess_type(filename or "")
    if guessed and guessed.startswith("image/"):
        return guessed
    return "image/jpeg"


def format_question_label(order_index: int) -> str:
    """Format question label for display"""
    return f"Question {order_index}"
