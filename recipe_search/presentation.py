"""
View model for the search screen.

render_state is a pure function of SearchState: it decides what the screen shows
(prompt, spinner, recipe cards or error text) without touching any UI toolkit, so
the Streamlit page only lays out the result.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from recipe_search.models import Recipe
from recipe_search.state import Empty, Error, Loading, SearchState, Success

EMPTY_PROMPT = "Please enter a keyword and click Search."
UNKNOWN_MEAL = "Unknown Meal"
NO_INSTRUCTIONS = "No instructions"
SUMMARY_LENGTH = 100


@dataclass(frozen=True)
class RecipeCard:
    title: str
    image_url: Optional[str]
    summary: str


@dataclass(frozen=True)
class SearchView:
    """What the screen renders for one state. At most one field is set."""
    prompt: Optional[str] = None
    loading: bool = False
    cards: List[RecipeCard] = field(default_factory=list)
    error: Optional[str] = None


def to_card(recipe: Recipe) -> RecipeCard:
    """Card for one recipe: title, thumbnail and the first 100 characters of instructions."""
    if recipe.instructions is not None:
        summary = recipe.instructions[:SUMMARY_LENGTH]
    else:
        summary = NO_INSTRUCTIONS
    return RecipeCard(
        title=recipe.name if recipe.name is not None else UNKNOWN_MEAL,
        image_url=recipe.image_url,
        summary=summary,
    )


def render_state(state: SearchState) -> SearchView:
    """
    Map a SearchState to the view the screen should show.

    Raises:
        TypeError: If state is not one of the four SearchState variants
    """
    if isinstance(state, Empty):
        return SearchView(prompt=EMPTY_PROMPT)
    if isinstance(state, Loading):
        return SearchView(loading=True)
    if isinstance(state, Success):
        return SearchView(cards=[to_card(recipe) for recipe in state.recipes])
    if isinstance(state, Error):
        return SearchView(error=f"Error: {state.message}")
    raise TypeError(f"Unknown search state: {state!r}")
