from abc import ABC, abstractmethod
from typing import Optional

class BaseExtractionModel(ABC):
    """
    Abstract Base Class for AI question extraction models.
    Defines the interface that all extraction models must implement.
    """

    @abstractmethod
    async def extract_text(self, image_bytes: bytes, mime_type: str) -> Optional[str]:
        """
        Sends one image with the extraction prompt to the model.

        Args:
            image_bytes: Raw bytes of the uploaded image.
            mime_type: MIME type of the image, e.g. "image/png".

        Returns:
            The text of the first part of the first candidate, or None when the
            model returned no usable candidate. The text is returned as-is and may
            still be wrapped in markdown fences.
        """
        pass
