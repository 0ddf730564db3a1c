"""
Recipe Search - Streamlit Frontend Main Entry Point.

A single search screen: type a keyword, click Search, and browse matching recipes
from TheMealDB with image, title and the start of the instructions.

Run the app with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_search
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipe_search import config

import logging

import streamlit as st

from recipe_search.presentation import render_state
from ui.feedback import render_view, working_spinner
from utils.state import get_last_query, get_search_state, init_search, run_search

logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Search",
    page_icon="🍳",
    layout="centered",
)

init_search()

st.title("🍳 Recipe Search")

with st.form("search_form"):
    query = st.text_input("Search for a recipe", value=get_last_query())
    submitted = st.form_submit_button("Search", type="primary")

if submitted:
    with working_spinner("Searching recipes…"):
        run_search(query)

st.divider()

render_view(render_state(get_search_state()))
