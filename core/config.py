import os
import logging
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# ==================== APP CONFIGURATION ====================
APP_TITLE = "The Brain of Ayotto"
APP_TAGLINE = "The uniqueness of Ayotto AI that can reduce time, effort & cost"
APP_ICON = "🧠"
LAYOUT = "centered"

# ==================== SUBMIT CONFIGURATION ====================
# "relay" posts the image to the backend, "gemini" calls the Gemini API directly
SUBMIT_MODE = os.getenv("SUBMIT_MODE", "gemini").strip().lower()
RELAY_ENDPOINT = os.getenv("RELAY_ENDPOINT", "http://localhost:5000/generate")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "60"))

# ==================== MODEL CONFIGURATION ====================
GEMINI_EXTRACTION_MODEL = os.getenv("GEMINI_EXTRACTION_MODEL", "gemini-1.5-flash")

# ==================== API CONFIGURATION ====================
# No placeholder fallback: a missing key is reported, never silently replaced
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# ==================== LOGGING CONFIGURATION ====================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOGS_DIR = os.getenv("LOGS_DIR", "logs")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(message)s"

# ==================== IMAGE SETTINGS ====================
# Passed to the uploader as a hint, not enforced server-side
SUPPORTED_IMAGE_FORMATS = ["png", "jpg", "jpeg", "gif", "webp"]


@dataclass(frozen=True)
class ExtractionSettings:
    """Explicit configuration handed to every extraction call."""
    api_key: Optional[str]
    model_name: str = GEMINI_EXTRACTION_MODEL
    relay_endpoint: str = RELAY_ENDPOINT
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS


def load_settings() -> ExtractionSettings:
    """Build extraction settings from the environment-derived constants."""
    return ExtractionSettings(
        api_key=GEMINI_API_KEY or None,
        model_name=GEMINI_EXTRACTION_MODEL,
        relay_endpoint=RELAY_ENDPOINT,
        timeout_seconds=REQUEST_TIMEOUT_SECONDS,
    )


def configure_logging(level: str = LOG_LEVEL):
    """Install the console handler on the root logger (no-op if one exists)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
