import logging
import uuid
from typing import Any, Optional

from google import genai
from google.genai import types

from .base_model import BaseExtractionModel
from core.llm_logger import log_llm_call, SERVICE_QUESTION_EXTRACTION
from core.prompts import QUESTION_EXTRACTION_PROMPT

# Setup logging
logger = logging.getLogger(__name__)

class GeminiModel(BaseExtractionModel):
    """
    An implementation of the BaseExtractionModel using Google's Gemini Vision models.
    """

    def __init__(self, api_key: str, model_name: str, client: Any = None):
        if not api_key:
            raise ValueError("Gemini API key is required.")
        self.client = client or genai.Client(api_key=api_key)
        self.model_name = model_name
        logger.info(f"GeminiModel initialized with model: {self.model_name}")

    def _build_contents(self, image_bytes: bytes, mime_type: str):
        parts = [
            types.Part.from_text(text=QUESTION_EXTRACTION_PROMPT),
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
        ]
        return [types.Content(role="user", parts=parts)]

    @staticmethod
    def _first_candidate_text(response: Any) -> Optional[str]:
        """Return the first candidate's first text part, or None."""
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return None
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        if not parts:
            return None
        text = getattr(parts[0], "text", None)
        return text or None

    async def extract_text(self, image_bytes: bytes, mime_type: str) -> Optional[str]:
        run_id = str(uuid.uuid4())
        logger.info(
            "run=%s start extract_text model=%s mime=%s size=%d",
            run_id, self.model_name, mime_type, len(image_bytes),
        )

        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=self._build_contents(image_bytes, mime_type),
            config=types.GenerateContentConfig(temperature=0),
        )

        log_llm_call(response, self.model_name, SERVICE_QUESTION_EXTRACTION)

        text = self._first_candidate_text(response)
        if text is None:
            logger.warning("run=%s Gemini API returned no candidate text", run_id)
        else:
            logger.debug("run=%s llm_raw_text=%s", run_id, text[:500])
        return text
