# services/extraction_service.py
import asyncio
import logging
from enum import Enum
from typing import Any, List, NamedTuple, Optional

import httpx

from core.ai_models import BaseExtractionModel, get_extraction_model
from core.config import ExtractionSettings
from core.models import MalformedQuestionsError, Question
from core.utils import get_image_mime_type, parse_questions, parse_questions_json

logger = logging.getLogger(__name__)


class SubmitMode(str, Enum):
    RELAY = "relay"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, value: str) -> "SubmitMode":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            logger.warning(f"Unknown submit mode {value!r}, falling back to {cls.GEMINI.value}")
            return cls.GEMINI


class ExtractionError(str, Enum):
    MISSING_IMAGE = "missing_image"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    BACKEND_REJECTED = "backend_rejected"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_JSON = "malformed_json"


class ExtractionResult(NamedTuple):
    """Outcome of one submit: either questions or a typed error, never both."""
    success: bool
    message: str
    questions: List[Question]
    error: Optional[ExtractionError] = None

    @classmethod
    def ok(cls, questions: List[Question]) -> "ExtractionResult":
        return cls(True, f"Extracted {len(questions)} questions.", list(questions), None)

    @classmethod
    def failure(cls, error: ExtractionError, message: str) -> "ExtractionResult":
        return cls(False, message, [], error)


class ImagePayload(NamedTuple):
    name: str
    mime_type: str
    data: bytes


MISSING_IMAGE_MESSAGE = "Please select an image first."
UNREADABLE_IMAGE_MESSAGE = "Could not read the selected image. Please choose it again."


async def load_image(uploaded_file: Any) -> ImagePayload:
    """Reads an uploaded file's bytes off the event loop."""
    read = getattr(uploaded_file, "getvalue", None) or uploaded_file.read
    data = await asyncio.to_thread(read)
    name = getattr(uploaded_file, "name", "") or "image"
    mime_type = get_image_mime_type(name, getattr(uploaded_file, "type", None))
    return ImagePayload(name=name, mime_type=mime_type, data=data)


class QuestionExtractionService:
    """Service layer that turns one image into a list of questions."""

    @staticmethod
    async def extract_via_relay(
        image: Any,
        settings: ExtractionSettings,
        client: Optional[httpx.AsyncClient] = None,
    ) -> ExtractionResult:
        """
        Posts the image as multipart field "image" to the backend relay.

        The backend answers {"success": bool, "questions": [...]}.
        """
        if image is None:
            return ExtractionResult.failure(ExtractionError.MISSING_IMAGE, MISSING_IMAGE_MESSAGE)

        try:
            payload = await load_image(image)
        except OSError as e:
            logger.exception(f"Could not read upload: {e}")
            return ExtractionResult.failure(ExtractionError.TRANSPORT, UNREADABLE_IMAGE_MESSAGE)

        try:
            files = {"image": (payload.name, payload.data, payload.mime_type)}
            logger.info(f"Posting {payload.name} ({len(payload.data)} bytes) to {settings.relay_endpoint}")

            if client is None:
                async with httpx.AsyncClient(timeout=settings.timeout_seconds) as own_client:
                    response = await own_client.post(settings.relay_endpoint, files=files)
            else:
                response = await client.post(settings.relay_endpoint, files=files)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.exception(f"Upload error: {e}")
            return ExtractionResult.failure(ExtractionError.TRANSPORT, "Could not reach the question service. Please try again.")

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Relay returned a non-JSON body: {response.text[:200]}")
            return ExtractionResult.failure(ExtractionError.MALFORMED_JSON, "The question service returned an unreadable response.")

        if not isinstance(data, dict) or not data.get("success"):
            logger.warning(f"Relay reported failure: {str(data)[:200]}")
            return ExtractionResult.failure(ExtractionError.BACKEND_REJECTED, "Error processing image")

        try:
            questions = parse_questions(data.get("questions", []))
        except MalformedQuestionsError as e:
            logger.error(f"Relay questions did not match the schema: {e}")
            return ExtractionResult.failure(ExtractionError.MALFORMED_JSON, "The question service returned questions in an unexpected format.")

        logger.info(f"Relay returned {len(questions)} questions")
        return ExtractionResult.ok(questions)

    @staticmethod
    async def extract_via_gemini(
        image: Any,
        settings: ExtractionSettings,
        model: Optional[BaseExtractionModel] = None,
    ) -> ExtractionResult:
        """Sends the image with the extraction prompt straight to Gemini."""
        if image is None:
            return ExtractionResult.failure(ExtractionError.MISSING_IMAGE, MISSING_IMAGE_MESSAGE)

        if model is None:
            if not settings.api_key:
                logger.error("GEMINI_API_KEY is not configured")
                return ExtractionResult.failure(
                    ExtractionError.CONFIGURATION,
                    "Gemini API key is not configured. Set GEMINI_API_KEY and restart the app.",
                )
            model = get_extraction_model(settings)

        try:
            payload = await load_image(image)
        except OSError as e:
            logger.exception(f"Could not read upload: {e}")
            return ExtractionResult.failure(ExtractionError.TRANSPORT, UNREADABLE_IMAGE_MESSAGE)

        try:
            text = await model.extract_text(payload.data, payload.mime_type)
        except Exception as e:
            logger.exception(f"Gemini request failed: {e}")
            return ExtractionResult.failure(ExtractionError.TRANSPORT, "The AI service request failed. Please try again.")

        if not text:
            return ExtractionResult.failure(ExtractionError.EMPTY_RESPONSE, "The AI returned no answer for this image.")

        try:
            questions = parse_questions_json(text)
        except MalformedQuestionsError as e:
            logger.error(f"JSON parsing failed: {e}; raw response: {text[:200]}...")
            return ExtractionResult.failure(ExtractionError.MALFORMED_JSON, "The AI answer could not be read as questions.")

        logger.info(f"Gemini returned {len(questions)} questions")
        return ExtractionResult.ok(questions)

    @staticmethod
    async def extract_questions(mode: SubmitMode, image: Any, settings: ExtractionSettings) -> ExtractionResult:
        """Dispatches one submit to the configured variant."""
        if SubmitMode.parse(mode) is SubmitMode.RELAY:
            return await QuestionExtractionService.extract_via_relay(image, settings)
        return await QuestionExtractionService.extract_via_gemini(image, settings)
