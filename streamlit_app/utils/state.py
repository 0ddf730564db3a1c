"""
Search State Holder Module.

This module wraps Streamlit's session_state to hold one RecipeSearch per browser
session. The state machine is created lazily on first access and reused on every
rerun of the script, so the last search result survives button clicks.

# NOTE: This module uses session_state, so the search state persists only for the
    current Streamlit session. Refreshing the page starts again from Empty.
"""

from typing import Optional

import streamlit as st

from recipe_search.connectors.base import BaseConnector
from recipe_search.search import RecipeSearch
from recipe_search.state import SearchState

# Session state keys
SEARCH_KEY = "recipe_search"
LAST_QUERY_KEY = "last_query"


def init_search(connector: Optional[BaseConnector] = None) -> None:
    """
    Ensure a RecipeSearch exists in session state.

    Args:
        connector: Connector for the new state machine (optional, defaults to TheMealDB)
    """
    if SEARCH_KEY not in st.session_state:
        st.session_state[SEARCH_KEY] = RecipeSearch(connector)


def get_search() -> RecipeSearch:
    """Get this session's RecipeSearch, creating it if needed."""
    init_search()
    return st.session_state[SEARCH_KEY]


def get_search_state() -> SearchState:
    """Current SearchState of this session."""
    return get_search().state


def run_search(query: str) -> SearchState:
    """
    Submit a query on this session's state machine and wait for the outcome.

    Args:
        query: Text typed by the user

    Returns:
        The published SearchState
    """
    st.session_state[LAST_QUERY_KEY] = query
    return get_search().submit_query_sync(query)


def get_last_query() -> str:
    """Last query submitted in this session, or an empty string."""
    return st.session_state.get(LAST_QUERY_KEY, "")
