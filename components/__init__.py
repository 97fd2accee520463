# Components module for the question extractor
# Reusable UI components for better modularity

from .file_uploader import FileUploaderComponent
from .question_display import QuestionDisplayComponent
from .shared_components import render_extraction_feedback

__all__ = [
    'FileUploaderComponent',
    'QuestionDisplayComponent',
    'render_extraction_feedback'
]
