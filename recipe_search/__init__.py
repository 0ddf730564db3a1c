"""
Recipe Search core package.

- models: Recipe and the TheMealDB response envelope
- connectors: search clients (TheMealDB)
- state: the four-variant SearchState
- search: RecipeSearch state machine
- presentation: pure view model for the search screen
"""

from recipe_search.search import RecipeSearch
from recipe_search.state import Empty, Error, Loading, SearchState, Success

__all__ = ["RecipeSearch", "SearchState", "Empty", "Loading", "Success", "Error"]
