# core/models.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

# Value the model writes into isExtraImageExist when a figure is referenced
EXTRA_IMAGE_SENTINEL = "yes"


class MalformedQuestionsError(ValueError):
    """Raised when model or backend output does not match the Question schema."""


def _text_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _bool_field(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    # Models sometimes quote booleans; anything else is a schema error
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise MalformedQuestionsError(f"{key} must be a boolean, got {value!r}")


def _sentinel_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if isinstance(value, bool):
        return EXTRA_IMAGE_SENTINEL if value else ""
    return _text_field(data, key)


@dataclass
class Option:
    """One answer choice of a multiple-choice question."""
    text: str
    is_correct: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Option":
        if not isinstance(data, dict):
            raise MalformedQuestionsError(f"Option must be an object, got {type(data).__name__}")
        return cls(text=_text_field(data, "text"), is_correct=_bool_field(data, "isCorrect"))

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "isCorrect": self.is_correct}


@dataclass
class Question:
    """A multiple-choice question extracted from an image."""
    question_text: str
    is_extra_image_exist: str = ""
    reference_text: str = ""
    solution_text: str = ""
    options: List[Option] = field(default_factory=list)

    @property
    def has_extra_image(self) -> bool:
        return self.is_extra_image_exist.strip().lower() == EXTRA_IMAGE_SENTINEL

    @property
    def correct_options(self) -> List[Option]:
        return [option for option in self.options if option.is_correct]

    @classmethod
    def from_dict(cls, data: Any) -> "Question":
        if not isinstance(data, dict):
            raise MalformedQuestionsError(f"Question must be an object, got {type(data).__name__}")

        raw_options = data.get("options")
        if raw_options is None:
            raw_options = []
        if not isinstance(raw_options, list):
            raise MalformedQuestionsError("Question options must be an array")

        return cls(
            question_text=_text_field(data, "questionText"),
            is_extra_image_exist=_sentinel_field(data, "isExtraImageExist"),
            reference_text=_text_field(data, "referenceText"),
            solution_text=_text_field(data, "solutionText"),
            options=[Option.from_dict(option) for option in raw_options],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questionText": self.question_text,
            "isExtraImageExist": self.is_extra_image_exist,
            "referenceText": self.reference_text,
            "solutionText": self.solution_text,
            "options": [option.to_dict() for option in self.options],
        }
