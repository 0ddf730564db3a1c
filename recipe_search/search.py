"""
Recipe search state machine.

RecipeSearch owns the UI state of the search screen and is the only writer of it.
Every transition starts from submit_query:

    Empty/Loading/Success/Error --submit_query(blank)--> Empty
    Empty/Loading/Success/Error --submit_query(text)---> Loading
    Loading --results--> Success
    Loading --no results--> Error('No meals found for "<query>"')
    Loading --client failure--> Error(<message> or "Unknown error")

The blocking HTTP call runs in a worker thread (BaseConnector.search_recipes_async);
state is published back on the caller's event loop.

A second submit_query does not cancel the first request. Each call takes a sequence
number, and a response that arrives after a newer query was submitted is dropped
instead of overwriting the newer state.

Search flow: Streamlit -> RecipeSearch.submit_query() -> connector.search_recipes() -> Recipe -> SearchState
"""

import asyncio
import logging
from typing import Callable, List, Optional

from recipe_search.connectors.base import BaseConnector, SearchClientError
from recipe_search.connectors.mealdb_connector import MealDBConnector
from recipe_search.state import (
    UNKNOWN_ERROR_MESSAGE,
    Empty,
    Error,
    Loading,
    SearchState,
    Success,
    no_results_message,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[SearchState], None]


class RecipeSearch:
    """
    Owns the four-variant search state and its transitions.

    The presentation layer reads `state` or registers a listener with
    `subscribe`; the only way to change state is `submit_query`.

    Attributes:
        connector: Search client used for non-blank queries
    """

    def __init__(self, connector: Optional[BaseConnector] = None) -> None:
        self.connector = connector if connector is not None else MealDBConnector()
        self._state: SearchState = Empty()
        self._listeners: List[StateListener] = []
        self._sequence = 0

    @property
    def state(self) -> SearchState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback invoked with every new state, in transition order.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: SearchState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.error("Search state listener %r failed on %r: %s", listener, state, e, exc_info=True)

    async def submit_query(self, query: str) -> SearchState:
        """
        Run one search and publish the resulting state.

        A blank or whitespace-only query resets to Empty without touching the
        network. Otherwise state moves to Loading, the connector is awaited, and
        the outcome is mapped to Success or Error. Client failures never escape
        this method.

        Args:
            query: Free-text search term, passed to the API as typed

        Returns:
            The state published for this query, or the current state if the
            response was superseded by a newer submit_query call.
        """
        self._sequence += 1
        request_id = self._sequence

        if not query or not query.strip():
            logger.debug("Blank query, resetting search state to Empty")
            self._publish(Empty())
            return self._state

        logger.info("Search request #%d: query=%r source=%s", request_id, query, self.connector.source)
        self._publish(Loading())

        try:
            recipes = await self.connector.search_recipes_async(query)
        except SearchClientError as e:
            logger.warning("Search #%d for %r failed: %s", request_id, query, e)
            outcome: SearchState = Error(str(e) or UNKNOWN_ERROR_MESSAGE)
        except Exception as e:
            logger.error("Unexpected error during search #%d for %r: %s", request_id, query, e, exc_info=True)
            outcome = Error(str(e) or UNKNOWN_ERROR_MESSAGE)
        else:
            if recipes:
                outcome = Success(tuple(recipes))
            else:
                logger.debug("No recipes for query=%r", query)
                outcome = Error(no_results_message(query))

        if request_id != self._sequence:
            logger.debug(
                "Discarding stale response for search #%d (latest is #%d)", request_id, self._sequence
            )
            return self._state

        self._publish(outcome)
        return outcome

    def submit_query_sync(self, query: str) -> SearchState:
        """
        Run submit_query to completion on a fresh event loop.

        For callers without a running loop, such as the Streamlit script thread.
        """
        return asyncio.run(self.submit_query(query))
