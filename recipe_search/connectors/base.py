"""
Base connector abstract class for recipe API integrations.

This module defines the abstract base class that recipe search clients implement,
along with the errors they raise. The state machine in recipe_search.search only
talks to this interface, so tests can hand it a stub connector.

All connectors must:
- Implement the source attribute (e.g., "mealdb")
- Provide a search_recipes method that returns a list of Recipe models
- Raise NetworkError or ParseError (never raw requests/pydantic errors)
"""

import asyncio
from abc import ABC, abstractmethod
from typing import List

from recipe_search.models import Recipe


class SearchClientError(Exception):
    """Base class for failures of a recipe search request."""
    pass


class NetworkError(SearchClientError):
    """
    Exception raised when the API cannot be reached or answers with an error.

    This exception is raised when:
    - The connection fails (DNS, refused, reset)
    - The connect or read timeout expires
    - The API returns a non-2xx status
    """
    pass


class ParseError(SearchClientError):
    """
    Exception raised when the response body cannot be turned into recipes.

    This exception is raised when:
    - The body is not valid JSON
    - The JSON does not match the {"meals": [...] | null} envelope
    """
    pass


class BaseConnector(ABC):
    """
    Abstract base class for recipe search connectors.

    Attributes:
        source: String identifier for the upstream API (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def search_recipes(self, query: str) -> List[Recipe]:
        """
        Search recipes by keyword.

        Blocks until the request completes.

        Args:
            query: Free-text search term (e.g., "pasta")

        Returns:
            List of Recipe objects, empty when nothing matches.

        Raises:
            NetworkError: On connectivity problems, timeouts or HTTP error statuses
            ParseError: On a malformed response body
        """
        pass

    async def search_recipes_async(self, query: str) -> List[Recipe]:
        """Awaitable search_recipes; the blocking call runs in a worker thread."""
        return await asyncio.to_thread(self.search_recipes, query)
