# components/file_uploader.py
import streamlit as st
from typing import Optional
from PIL import Image, UnidentifiedImageError

from core.config import SUPPORTED_IMAGE_FORMATS

class FileUploaderComponent:
    """
    Reusable widget for choosing the image to extract questions from.
    It only renders widgets and returns the user's selection.
    """

    @staticmethod
    def _render_image_preview(uploaded_file):
        """Shows the selected image, or a note when it cannot be decoded."""
        try:
            image = Image.open(uploaded_file)
            st.image(image, caption=f"{uploaded_file.name} • {image.width}×{image.height}")
        except (UnidentifiedImageError, OSError) as e:
            st.warning(f"Could not preview {uploaded_file.name}: {e}")
        finally:
            uploaded_file.seek(0)

    @staticmethod
    def render_image_uploader(
        label: str = "Select an image",
        key: str = "image_uploader",
        help_text: str = None,
        show_preview: bool = True
    ) -> Optional[object]:
        """
        Renders a single-file image picker.

        The type filter is a hint for the browser dialog; nothing is validated here.
        """
        if help_text is None:
            help_text = f"Supported formats: {', '.join(SUPPORTED_IMAGE_FORMATS).upper()}."

        uploaded_file = st.file_uploader(
            label=label,
            type=SUPPORTED_IMAGE_FORMATS,
            accept_multiple_files=False,
            help=help_text,
            key=key
        )

        if uploaded_file is not None and show_preview:
            FileUploaderComponent._render_image_preview(uploaded_file)

        return uploaded_file
