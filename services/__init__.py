# Services module for the question extractor
# Business logic layer separated from UI

from .extraction_service import (
    ExtractionError,
    ExtractionResult,
    QuestionExtractionService,
    SubmitMode,
)

__all__ = [
    'ExtractionError',
    'ExtractionResult',
    'QuestionExtractionService',
    'SubmitMode'
]
