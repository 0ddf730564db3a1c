"""
TheMealDB connector using the public JSON API.

This connector interfaces with TheMealDB's free lookup API to search recipes by
name and normalize them into Recipe models.

The connector:
- Calls GET {base_url}/search.php?s={query} with a single requests.Session
- Uses fixed connect/read timeouts (30 seconds each unless configured otherwise)
- Maps a null "meals" field to an empty list
- Translates requests and pydantic failures into NetworkError / ParseError
- Does not retry and does not cache

Base URL and timeouts come from recipe_search.config (MEALDB_* variables), with
defaults matching the public endpoint.
"""

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from recipe_search.config import MealDBConfig
from recipe_search.models import MealSearchResponse, Recipe

from .base import BaseConnector, NetworkError, ParseError

logger = logging.getLogger(__name__)

SEARCH_PATH = "search.php"


class MealDBConnector(BaseConnector):
    """
    Connector for TheMealDB recipe search.

    One instance owns one requests.Session, so connections are reused across
    searches made from the same screen.
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or uses the public endpoint)
            connect_timeout: Connect timeout in seconds (optional, default 30)
            read_timeout: Read timeout in seconds (optional, default 30)
            session: requests.Session to use (optional, a new one is created)

        Raises:
            RuntimeError: If the base URL is empty or a timeout is not positive.
        """
        self.base_url = (base_url if base_url is not None else MealDBConfig.get_base_url()).rstrip("/")
        if not self.base_url:
            raise RuntimeError(
                "MEALDB_BASE_URL is empty. Unset it to use the public endpoint or set it "
                "to a full URL, e.g. https://www.themealdb.com/api/json/v1/1"
            )

        self.connect_timeout = connect_timeout if connect_timeout is not None else MealDBConfig.get_connect_timeout()
        self.read_timeout = read_timeout if read_timeout is not None else MealDBConfig.get_read_timeout()
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise RuntimeError(
                f"Timeouts must be positive, got connect={self.connect_timeout} read={self.read_timeout}. "
                "Check MEALDB_CONNECT_TIMEOUT and MEALDB_READ_TIMEOUT."
            )

        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/json"

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/{SEARCH_PATH}"

    def search_recipes(self, query: str) -> List[Recipe]:
        """
        Search TheMealDB for meals whose name matches the query.

        Args:
            query: Search term, sent as the "s" parameter (URL-encoded by requests)

        Returns:
            List of Recipe objects in API order. Empty if the API reports no meals.

        Raises:
            NetworkError: Connection failure, timeout, or non-2xx status
            ParseError: Body is not JSON or does not match the expected envelope
        """
        logger.debug("GET %s s=%r", self.search_url, query)
        try:
            response = self.session.get(
                self.search_url,
                params={"s": query},
                timeout=(self.connect_timeout, self.read_timeout),
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Request to TheMealDB timed out: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Could not connect to TheMealDB: {e}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise NetworkError(f"TheMealDB returned an error: HTTP {status}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"An error occurred while searching TheMealDB: {e}") from e

        logger.debug("Response %d from %s: %s", response.status_code, response.url, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"TheMealDB returned a non-JSON response: {e}") from e

        try:
            envelope = MealSearchResponse.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                f"Unexpected response format from TheMealDB: {e.error_count()} validation error(s). "
                "The API may have changed its output format."
            ) from e

        recipes = envelope.recipes
        logger.info("TheMealDB returned %d recipes for query=%r", len(recipes), query)
        return recipes
