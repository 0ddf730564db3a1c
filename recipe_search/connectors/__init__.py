"""
Recipe API connectors.

- base: BaseConnector interface and the SearchClientError hierarchy
- mealdb_connector: TheMealDB search client
"""

from .base import BaseConnector, NetworkError, ParseError, SearchClientError
from .mealdb_connector import MealDBConnector

__all__ = [
    "BaseConnector",
    "MealDBConnector",
    "NetworkError",
    "ParseError",
    "SearchClientError",
]
