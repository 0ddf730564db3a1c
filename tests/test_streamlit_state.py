"""
Tests for the Streamlit session holder of the search state machine.

Streamlit's session_state is replaced with a plain dict so the helpers can run
outside a Streamlit script.
"""

from unittest.mock import Mock, patch

from recipe_search.connectors.base import BaseConnector
from recipe_search.models import Recipe
from recipe_search.search import RecipeSearch
from recipe_search.state import Empty, Success
from streamlit_app.utils import state as search_state


class OneRecipeConnector(BaseConnector):
    source = "fake"

    def __init__(self):
        self.calls = []

    def search_recipes(self, query):
        self.calls.append(query)
        return [Recipe(id="1", name="Pasta")]


class TestSessionSearch:
    """Test the per-session RecipeSearch lifecycle."""

    def test_search_created_once_per_session(self):
        fake_st = Mock()
        fake_st.session_state = {}
        with patch.object(search_state, "st", fake_st):
            search_state.init_search(OneRecipeConnector())
            first = search_state.get_search()
            second = search_state.get_search()

        assert isinstance(first, RecipeSearch)
        assert first is second
        assert isinstance(first.connector, OneRecipeConnector)

    def test_run_search_updates_state_and_last_query(self):
        fake_st = Mock()
        fake_st.session_state = {}
        connector = OneRecipeConnector()
        with patch.object(search_state, "st", fake_st):
            search_state.init_search(connector)
            assert search_state.get_search_state() == Empty()
            assert search_state.get_last_query() == ""

            result = search_state.run_search("pasta")

            assert result == Success((Recipe(id="1", name="Pasta"),))
            assert search_state.get_search_state() == result
            assert search_state.get_last_query() == "pasta"
        assert connector.calls == ["pasta"]
