# app.py
import streamlit as st
import os
import sys

# Add the project root to Python path
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from core.config import APP_TITLE, APP_TAGLINE, APP_ICON, LAYOUT, LOG_LEVEL, configure_logging
from views import show_extract_questions_view

# Configure Streamlit page
st.set_page_config(
    page_title=APP_TITLE,
    page_icon=APP_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded"
)

configure_logging(LOG_LEVEL)

def main():
    """Main application entry point"""
    st.title(f"{APP_ICON} {APP_TITLE}")
    st.markdown(APP_TAGLINE)

    show_extract_questions_view()

if __name__ == "__main__":
    main()
