"""
Tests for the search screen view model.

render_state is pure, so these tests feed it each SearchState variant and check
what the screen would show.
"""

import pytest

from recipe_search.models import Recipe
from recipe_search.presentation import (
    EMPTY_PROMPT,
    NO_INSTRUCTIONS,
    UNKNOWN_MEAL,
    RecipeCard,
    SearchView,
    render_state,
    to_card,
)
from recipe_search.state import Empty, Error, Loading, Success


class TestRenderState:
    """Test each state maps to exactly one kind of view."""

    def test_empty_shows_prompt(self):
        assert render_state(Empty()) == SearchView(prompt=EMPTY_PROMPT)
        assert EMPTY_PROMPT == "Please enter a keyword and click Search."

    def test_loading_shows_spinner(self):
        view = render_state(Loading())
        assert view.loading is True
        assert view.cards == []
        assert view.error is None

    def test_error_is_prefixed(self):
        view = render_state(Error('No meals found for "xyzzy"'))
        assert view.error == 'Error: No meals found for "xyzzy"'
        assert view.prompt is None

    def test_success_renders_one_card_per_recipe(self):
        recipes = (
            Recipe(id="1", name="Pasta", image_url="http://x/img.jpg", instructions="Boil water..."),
            Recipe(id="2", name="Pizza"),
        )
        view = render_state(Success(recipes))
        assert [card.title for card in view.cards] == ["Pasta", "Pizza"]

    def test_unknown_state_raises(self):
        with pytest.raises(TypeError, match="Unknown search state"):
            render_state("loading")


class TestRecipeCard:
    """Test card fallbacks and instruction truncation."""

    def test_instructions_truncated_to_100_characters(self):
        recipe = Recipe(id="1", name="Long", instructions="x" * 250)
        card = to_card(recipe)
        assert card.summary == "x" * 100

    def test_short_instructions_kept_whole(self):
        card = to_card(Recipe(id="1", name="Short", instructions="Stir."))
        assert card.summary == "Stir."

    def test_missing_fields_fall_back(self):
        """Test a record without name, image or instructions still renders."""
        card = to_card(Recipe(id="1"))
        assert card == RecipeCard(title=UNKNOWN_MEAL, image_url=None, summary=NO_INSTRUCTIONS)
