# components/question_display.py
import streamlit as st
from typing import List

from core.models import Option, Question
from core.utils import format_question_label

EMPTY_PLACEHOLDER = "No questions extracted yet. Select an image and press Extract Questions."

class QuestionDisplayComponent:
    """Reusable component for displaying extracted questions consistently."""

    @staticmethod
    def _render_option(option: Option, index: int):
        letter = chr(ord("A") + index) if index < 26 else str(index + 1)
        if option.is_correct:
            st.markdown(f":green[**{letter}. {option.text}** ✅]")
        else:
            st.markdown(f"{letter}. {option.text}")

    @staticmethod
    def render_question(question: Question, order_index: int):
        """Renders one question with its options, reference and solution."""
        with st.container(border=True):
            st.markdown(f"**{format_question_label(order_index)}**")
            st.markdown(question.question_text)

            if question.has_extra_image:
                st.caption("🖼️ This question refers to a figure in the original image.")

            if question.reference_text:
                st.info(question.reference_text)

            for i, option in enumerate(question.options):
                QuestionDisplayComponent._render_option(option, i)

            if question.solution_text:
                with st.expander("💡 Solution"):
                    st.markdown(question.solution_text)

    @staticmethod
    def render_question_list(questions: List[Question]):
        """Renders every question in order, or a placeholder when there are none."""
        if not questions:
            st.info(EMPTY_PLACEHOLDER)
            return

        st.subheader(f"Extracted Questions ({len(questions)})")
        for i, question in enumerate(questions, 1):
            QuestionDisplayComponent.render_question(question, i)
