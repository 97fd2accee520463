# views/extract_questions_view.py
import asyncio
import logging

import streamlit as st

from core.config import load_settings
from core.state_manager import AppState, get_app_state
from components.file_uploader import FileUploaderComponent
from components.question_display import QuestionDisplayComponent
from components.shared_components import render_extraction_feedback
from services.extraction_service import (
    MISSING_IMAGE_MESSAGE,
    ExtractionError,
    ExtractionResult,
    QuestionExtractionService,
    SubmitMode,
)

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "🚀 Extract Questions"
BUSY_LABEL = "⏳ Processing..."

MODE_LABELS = {
    SubmitMode.GEMINI: "Gemini direct",
    SubmitMode.RELAY: "Backend relay",
}


def _request_submit(app_state: AppState):
    """Button callback: runs before the rerun, so the button renders disabled."""
    if app_state.image is None:
        logger.info("Submit requested without an image")
        app_state.report(ExtractionResult.failure(ExtractionError.MISSING_IMAGE, MISSING_IMAGE_MESSAGE))
        return
    app_state.begin_submit()


def _run_pending_submit(app_state: AppState):
    """Performs the submit recorded by the button callback."""
    token = app_state.pending_token
    try:
        with st.spinner("Reading questions from the image..."):
            result = asyncio.run(
                QuestionExtractionService.extract_questions(
                    app_state.submit_mode, app_state.image, load_settings()
                )
            )
        app_state.complete_submit(token, result)
    finally:
        app_state.end_submit(token)
    st.rerun()


def render_mode_selector(app_state: AppState):
    """Sidebar switch between the relay and direct variants."""
    modes = list(MODE_LABELS)
    current = SubmitMode.parse(app_state.submit_mode)
    selected = st.radio(
        "Send image to:",
        modes,
        index=modes.index(current),
        format_func=lambda mode: MODE_LABELS[mode],
        disabled=app_state.in_flight,
        key="submit_mode_selector"
    )
    app_state.submit_mode = selected.value


def show_extract_questions_view():
    """Form-and-result view: pick an image, extract, render questions."""
    app_state = get_app_state()

    with st.sidebar:
        st.header("⚙️ Settings")
        render_mode_selector(app_state)

    app_state.image = FileUploaderComponent.render_image_uploader(
        label="Select an exam image",
        key="image_uploader"
    )

    st.button(
        BUSY_LABEL if app_state.in_flight else SUBMIT_LABEL,
        type="primary",
        disabled=app_state.in_flight,
        on_click=_request_submit,
        args=(app_state,),
        key="extract_button"
    )

    if app_state.pending_token is not None:
        _run_pending_submit(app_state)

    render_extraction_feedback(app_state.last_result)
    QuestionDisplayComponent.render_question_list(app_state.questions)
