# components/shared_components.py
import streamlit as st
from typing import Optional

from services.extraction_service import ExtractionError, ExtractionResult

# Errors the user can fix by retrying or picking another image
_WARNING_ERRORS = {
    ExtractionError.MISSING_IMAGE,
    ExtractionError.BACKEND_REJECTED,
    ExtractionError.EMPTY_RESPONSE,
    ExtractionError.MALFORMED_JSON,
}

def render_extraction_feedback(result: Optional[ExtractionResult]):
    """
    Shows the outcome of the last submit as a non-blocking message.

    Args:
        result: The latest extraction result, or None before the first submit.
    """
    if result is None:
        return

    if result.success:
        st.success(f"✅ {result.message}")
    elif result.error in _WARNING_ERRORS:
        st.warning(f"⚠️ {result.message}")
    else:
        st.error(f"❌ {result.message}")
