"""Base search backend — Abstract interface for the engine behind the dashboard.

A backend is responsible for:
  1. Executing structured queries
  2. Deleting documents matching a query expression
  3. Exposing the engine's status and schema documents
  4. Answering a cheap liveness probe
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from solrdash.models.delete import DeleteAck
from solrdash.models.query import FacetValue, QueryParameters, QueryResult


class SearchBackend(ABC):
    """Abstract base class for search backends.

    Every operation is a single request/response round trip.  Failures raise
    ``BackendUnavailableError`` carrying the underlying message, except for
    ``test_connection`` which reports them as ``False``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique backend name (e.g., 'solr')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Create connections and pools. Called once during application startup."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Release connections. Called during application shutdown."""

    @abstractmethod
    async def query(self, params: QueryParameters) -> QueryResult:
        """Run a query.

        Args:
            params: Structured query parameters; unset fields are not sent.

        Returns:
            The parsed result, including facet counts when requested.
        """

    @abstractmethod
    async def delete_by_query(self, expression: str) -> DeleteAck:
        """Delete every document matching ``expression`` and commit.

        Args:
            expression: A query expression built with exact-match quoting.

        Returns:
            The backend's acknowledgement.
        """

    @abstractmethod
    async def get_core_status(self) -> dict[str, Any]:
        """Return the engine's system/status document."""

    @abstractmethod
    async def get_schema(self) -> dict[str, Any]:
        """Return the index schema document."""

    @abstractmethod
    async def test_connection(self) -> bool:
        """Return whether a zero-row query succeeds. Never raises."""

    @abstractmethod
    async def unique_values(self, field: str, limit: int = 100, mincount: int = 1) -> list[FacetValue]:
        """Return the distinct values of ``field`` with their document counts.

        Args:
            field: Field to facet on.
            limit: Maximum number of values.
            mincount: Minimum document count for a value to be listed.

        Returns:
            Values ordered by count, most frequent first.
        """
