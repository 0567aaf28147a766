"""Dashboard service — The operations behind the HTTP API.

The service owns the search backend and implements:
  1. Config: the public part of the connection settings
  2. Connection: liveness probe, core info, schema
  3. Query: validated pass-through to the backend
  4. Delete: verify-then-delete by document id or by discriminator value
  5. Values: distinct values of a browsable field

Deletes check for matches first so callers get an explicit "nothing to
delete" instead of a silent no-op.  The count reported for a hash delete is
the one observed before deleting; it is not re-checked afterwards because
the index may still show stale results right after a commit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from solrdash.adapters.solr.query import term_query
from solrdash.core.exceptions import InvalidActionError, InvalidInputError, NotFoundError
from solrdash.models.config import ConnectionProbe, PublicConfig, UniqueValues
from solrdash.models.delete import DeleteRequest, DeleteResult
from solrdash.models.query import QueryParameters, QueryResult

if TYPE_CHECKING:
    from solrdash.adapters.base.adapter import SearchBackend
    from solrdash.config.settings import Settings

logger = logging.getLogger(__name__)

CONNECTION_ACTIONS = ("test", "info", "schema")


class DashboardService:
    """Stateless request handlers for the dashboard API.

    Attributes:
        settings: Application configuration.
        backend: Search backend (a ``SolrAdapter`` unless one is injected).
    """

    def __init__(self, settings: Settings, backend: SearchBackend | None = None) -> None:
        self.settings = settings
        if backend is None:
            from solrdash.adapters.solr.adapter import SolrAdapter

            backend = SolrAdapter(settings.solr)
        self.backend = backend

    async def initialize(self) -> None:
        """Initialize the backend connection."""
        await self.backend.initialize()
        logger.info("Dashboard service initialized (backend: %s)", self.backend.name)

    async def shutdown(self) -> None:
        """Release the backend connection."""
        await self.backend.shutdown()
        logger.info("Dashboard service shut down")

    # ──────────────────────────────────────────────────────────────────────
    # Config & connection
    # ──────────────────────────────────────────────────────────────────────

    def get_config(self) -> PublicConfig:
        """Return the connection settings the browser may see. Credentials are never included."""
        return PublicConfig(
            solr_url=self.settings.solr.url,
            solr_core=self.settings.solr.core,
            show_unique_values=self.settings.show_unique_values,
        )

    async def connection(self, action: str | None) -> ConnectionProbe | dict[str, Any]:
        """Dispatch a connection action.

        Args:
            action: ``test`` (liveness probe), ``info`` (core status) or
                ``schema``.

        Raises:
            InvalidActionError: For any other value, including ``None``.
        """
        if action == "test":
            return ConnectionProbe(connected=await self.backend.test_connection())
        if action == "info":
            return await self.backend.get_core_status()
        if action == "schema":
            return await self.backend.get_schema()
        raise InvalidActionError(f"Invalid action {action!r}. Use: {', '.join(CONNECTION_ACTIONS)}")

    # ──────────────────────────────────────────────────────────────────────
    # Query
    # ──────────────────────────────────────────────────────────────────────

    async def execute_query(self, params: QueryParameters) -> QueryResult:
        """Run a query against the backend.

        Backend errors propagate unchanged so the caller sees the original
        message.
        """
        for name in ("rows", "start"):
            value = getattr(params, name)
            if value is not None and value < 0:
                raise InvalidInputError(f"'{name}' must be a non-negative integer, got {value}")
        return await self.backend.query(params)

    # ──────────────────────────────────────────────────────────────────────
    # Delete
    # ──────────────────────────────────────────────────────────────────────

    async def delete_documents(self, request: DeleteRequest) -> DeleteResult:
        """Delete one document by id, or all documents with a hash value.

        Raises:
            NotFoundError: When nothing matches; no delete is issued then.
        """
        if request.id is not None:
            return await self._delete_by_id(request.id)
        if request.hash is not None:
            return await self._delete_by_hash(request.hash)
        raise InvalidInputError("Exactly one of 'id' or 'hash' is required")

    async def _delete_by_id(self, doc_id: str) -> DeleteResult:
        expression = term_query("id", doc_id)
        found = await self.backend.query(QueryParameters(q=expression, rows=1, start=0))
        if found.response.num_found == 0:
            raise NotFoundError(f'Document with ID "{doc_id}" not found')

        await self.backend.delete_by_query(expression)
        logger.info("Deleted document %r", doc_id)
        return DeleteResult(
            success=True,
            message=f'Document "{doc_id}" deleted successfully',
            deleted_id=doc_id,
        )

    async def _delete_by_hash(self, hash_value: str) -> DeleteResult:
        field = self.settings.solr.hash_field
        expression = term_query(field, hash_value)
        counted = await self.backend.query(QueryParameters(q=expression, rows=0))
        count = counted.response.num_found
        if count == 0:
            raise NotFoundError(f'No documents found with {field} "{hash_value}"')

        await self.backend.delete_by_query(expression)
        logger.info("Deleted %d documents with %s=%r", count, field, hash_value)
        return DeleteResult(
            success=True,
            message=f'Deleted {count} documents with {field} "{hash_value}"',
            deleted_count=count,
        )

    # ──────────────────────────────────────────────────────────────────────
    # Values
    # ──────────────────────────────────────────────────────────────────────

    async def unique_values(self, field: str | None = None, limit: int = 100, mincount: int = 1) -> UniqueValues:
        """List distinct values of ``field``, most frequent first.

        ``field`` defaults to ``SHOW_UNIQUE_VALUES`` and then to the hash
        field.
        """
        if limit < 1:
            raise InvalidInputError(f"'limit' must be at least 1, got {limit}")
        if mincount < 0:
            raise InvalidInputError(f"'mincount' must be non-negative, got {mincount}")

        field = field or self.settings.show_unique_values or self.settings.solr.hash_field
        values = await self.backend.unique_values(field, limit=limit, mincount=mincount)
        return UniqueValues(field=field, values=values, total=sum(v.count for v in values))
