# Views module for the question extractor
# Kept out of a "pages/" folder so Streamlit does not register it as multipage navigation
from .extract_questions_view import show_extract_questions_view

__all__ = [
    'show_extract_questions_view'
]
