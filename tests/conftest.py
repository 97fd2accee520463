import io
import os

import pytest

# Keep the usage log out of the working tree during tests
os.environ.setdefault("LOGS_DIR", os.path.join(os.path.dirname(__file__), ".logs"))

from core.config import ExtractionSettings


class FakeUpload(io.BytesIO):
    """Minimal stand-in for Streamlit's UploadedFile."""

    def __init__(self, data: bytes = b"\x89PNG fake", name: str = "exam.png", type: str = "image/png"):
        super().__init__(data)
        self.name = name
        self.type = type


QUESTIONS_PAYLOAD = [
    {
        "questionText": "What is 2 + 2?",
        "isExtraImageExist": "",
        "referenceText": "",
        "solutionText": "Two plus two equals four.",
        "options": [
            {"text": "3", "isCorrect": False},
            {"text": "4", "isCorrect": True},
        ],
    },
    {
        "questionText": "Which shape is shown in the figure?",
        "isExtraImageExist": "yes",
        "referenceText": "Look at Figure 1.",
        "solutionText": "",
        "options": [
            {"text": "Circle", "isCorrect": True},
            {"text": "Square", "isCorrect": False},
        ],
    },
]


@pytest.fixture
def upload():
    return FakeUpload()


@pytest.fixture
def make_upload():
    return FakeUpload


@pytest.fixture
def settings():
    return ExtractionSettings(
        api_key="test-key",
        model_name="gemini-1.5-flash",
        relay_endpoint="http://relay.test/generate",
        timeout_seconds=5,
    )


@pytest.fixture
def questions_payload():
    return [dict(q, options=[dict(o) for o in q["options"]]) for q in QUESTIONS_PAYLOAD]
