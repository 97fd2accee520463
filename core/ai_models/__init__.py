from .base_model import BaseExtractionModel
from .gemini_model import GeminiModel
from core.config import ExtractionSettings

def get_extraction_model(settings: ExtractionSettings) -> BaseExtractionModel:
    """
    Factory function to get the configured AI extraction model instance.
    Settings are passed in explicitly so callers control which key is used.
    """
    if not settings.api_key:
        raise ValueError("GEMINI_API_KEY is required when using Gemini provider")
    return GeminiModel(api_key=settings.api_key, model_name=settings.model_name)

__all__ = ['BaseExtractionModel', 'GeminiModel', 'get_extraction_model']
