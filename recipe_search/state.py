"""
Search UI state.

SearchState is a closed sum type with four variants. Exactly one is active at a
time; the state machine replaces the whole value on every transition and never
mutates one in place, so every variant is a frozen dataclass.

    Empty    - nothing searched yet, or the query was blank
    Loading  - a request is in flight
    Success  - the request returned at least one recipe
    Error    - the request failed or matched nothing
"""

from dataclasses import dataclass
from typing import Tuple, Union

from recipe_search.models import Recipe

UNKNOWN_ERROR_MESSAGE = "Unknown error"


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    recipes: Tuple[Recipe, ...]


@dataclass(frozen=True)
class Error:
    message: str


SearchState = Union[Empty, Loading, Success, Error]


def no_results_message(query: str) -> str:
    """Error text shown when a search matches zero meals."""
    return f'No meals found for "{query}"'
