"""Apache Solr adapter — Query, delete and admin calls over Solr's HTTP API.

Connects to a single Solr core (v8+) using ``httpx`` (async).  Queries go
to ``/select`` as GET requests with a plain query string; deletes go to
``/update`` as JSON update commands.

Usage::

    adapter = SolrAdapter(SolrSettings(url="http://localhost:8983/solr", core="logs"))
    await adapter.initialize()
    result = await adapter.query(QueryParameters(q="type:error", rows=5))
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from solrdash.adapters.base.adapter import SearchBackend
from solrdash.adapters.base.exceptions import BackendUnavailableError, ConfigurationError
from solrdash.adapters.solr.query import build_select_params
from solrdash.config.settings import SolrSettings
from solrdash.models.delete import DeleteAck
from solrdash.models.query import FacetValue, QueryParameters, QueryResult

logger = logging.getLogger(__name__)


class SolrAdapter(SearchBackend):
    """Search backend for one Apache Solr core.

    Supports:
      - ``/select`` queries with filter queries, sorting, field lists,
        faceting and pagination
      - delete-by-query through ``/update`` with an immediate commit
      - ``/admin/system`` and ``/schema`` pass-through

    Basic auth is attached only when both username and password are set.
    Every request uses the configured timeout; nothing is retried.

    Args:
        settings: Connection settings (base URL, core, credentials, timeout).
        **httpx_kwargs: Extra keyword arguments for ``httpx.AsyncClient``
            (e.g. ``transport`` in tests).
    """

    def __init__(self, settings: SolrSettings, **httpx_kwargs: Any) -> None:
        if not settings.url or not settings.core:
            raise ConfigurationError("Solr URL and core name must both be set.")
        self._settings = settings
        self._httpx_kwargs = httpx_kwargs
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return "solr"

    @property
    def settings(self) -> SolrSettings:
        return self._settings

    async def initialize(self) -> None:
        """Create the shared ``httpx.AsyncClient`` for the configured core."""
        auth = None
        if self._settings.has_credentials:
            auth = httpx.BasicAuth(self._settings.username or "", self._settings.password or "")

        self._client = httpx.AsyncClient(
            base_url=self._settings.core_url,
            timeout=httpx.Timeout(self._settings.timeout / 1000),
            auth=auth,
            **self._httpx_kwargs,
        )
        logger.info(
            "Solr adapter ready for core '%s' at %s (auth: %s)",
            self._settings.core,
            self._settings.url,
            "yes" if auth else "no",
        )

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Query ────────────────────────────────────────────────────────────

    async def query(self, params: QueryParameters) -> QueryResult:
        """Execute a ``/select`` query."""
        pairs = build_select_params(params)
        logger.debug("Solr query: %s", pairs)

        start = time.monotonic()
        data = await self._get_json("/select", params=pairs, action="query Solr")
        took_ms = int((time.monotonic() - start) * 1000)

        try:
            result = QueryResult.model_validate(data)
        except ValidationError as e:
            raise BackendUnavailableError(f"Failed to query Solr: unexpected response shape: {e}") from e

        logger.debug(
            "Solr query returned %d of %d docs in %d ms",
            len(result.response.docs),
            result.response.num_found,
            took_ms,
        )
        return result

    async def unique_values(self, field: str, limit: int = 100, mincount: int = 1) -> list[FacetValue]:
        """Facet on ``field`` without fetching documents.

        Pairs with an empty value or a zero count are left out; the rest are
        ordered by count, most frequent first.
        """
        result = await self.query(
            QueryParameters(
                q="*:*",
                rows=0,
                facet=True,
                facet_field=[field],
                facet_limit=limit,
                facet_mincount=mincount,
            )
        )
        values = [FacetValue(value=value, count=count) for value, count in result.facet_pairs(field) if value and count]
        values.sort(key=lambda v: v.count, reverse=True)
        return values

    # ── Update ───────────────────────────────────────────────────────────

    async def delete_by_query(self, expression: str) -> DeleteAck:
        """Delete all documents matching ``expression`` and commit."""
        client = self._require_client()
        logger.info("Solr delete-by-query on core '%s': %s", self._settings.core, expression)
        try:
            resp = await client.post(
                "/update",
                params={"commit": "true", "wt": "json"},
                json={"delete": {"query": expression}},
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise BackendUnavailableError(f"Failed to delete from Solr: {e}") from e
        except ValueError as e:
            raise BackendUnavailableError(f"Failed to delete from Solr: invalid JSON response: {e}") from e

        return DeleteAck.model_validate(data.get("responseHeader", {}) if isinstance(data, dict) else {})

    # ── Admin ────────────────────────────────────────────────────────────

    async def get_core_status(self) -> dict[str, Any]:
        """Return Solr's ``/admin/system`` document."""
        return await self._get_json("/admin/system", params={"wt": "json"}, action="get core info")

    async def get_schema(self) -> dict[str, Any]:
        """Return the core's ``/schema`` document."""
        return await self._get_json("/schema", params={"wt": "json"}, action="get schema")

    # ── Health ───────────────────────────────────────────────────────────

    async def test_connection(self) -> bool:
        """Run a zero-row query; any failure means ``False``."""
        try:
            await self.query(QueryParameters(q="*:*", rows=0))
        except Exception as e:
            logger.warning("Solr connection test failed for %s: %s", self._settings.core_url, e)
            return False
        logger.debug("Solr connection test succeeded for %s", self._settings.core_url)
        return True

    # ── Helpers ──────────────────────────────────────────────────────────

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise BackendUnavailableError("Solr client not initialized.")
        return self._client

    async def _get_json(self, path: str, *, params: Any, action: str) -> dict[str, Any]:
        """GET ``path`` and decode a JSON object, mapping every failure to ``BackendUnavailableError``."""
        client = self._require_client()
        try:
            resp = await client.get(path, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.error("Solr request to %s failed: %s", path, e)
            raise BackendUnavailableError(f"Failed to {action}: {e}") from e
        except ValueError as e:
            logger.error("Solr returned invalid JSON for %s: %s", path, e)
            raise BackendUnavailableError(f"Failed to {action}: invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise BackendUnavailableError(f"Failed to {action}: expected a JSON object, got {type(data).__name__}")
        return data
