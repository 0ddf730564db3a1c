"""
UI Components Module.

This module provides reusable rendering helpers for the Recipe Search
Streamlit app.
"""

from .feedback import render_view, show_empty_state, show_error, working_spinner

__all__ = [
    "render_view",
    "show_empty_state",
    "show_error",
    "working_spinner",
]
