"""SolrDash Python SDK — Async and sync clients for the SolrDash REST API.

Usage::

    # Async
    async with AsyncSolrDashClient("http://localhost:3000") as client:
        result = await client.query(q="type:error", rows=5)

    # Sync (wraps async client internally)
    client = SolrDashClient("http://localhost:3000")
    client.delete_by_hash("staging-42")
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar, cast

import httpx

_T = TypeVar("_T")

API_PREFIX = "/api/solr"

# ═══════════════════════════════════════════════════════════════════════════════
# Response types (lightweight dicts — avoids coupling to server models)
# ═══════════════════════════════════════════════════════════════════════════════

QueryResult = dict[str, Any]
"""Solr ``/select`` response dict (``responseHeader``, ``response``, ``facet_counts`` ...)."""

DeleteResult = dict[str, Any]
"""Delete response dict with ``success``, ``message`` and ``deletedId`` or ``deletedCount``."""

ValueCounts = dict[str, Any]
"""Distinct values response dict with ``field``, ``values`` and ``total``."""

# Python keyword arguments whose Solr names contain a dot
_DOTTED = {
    "facet_field": "facet.field",
    "facet_limit": "facet.limit",
    "facet_mincount": "facet.mincount",
}


# ═══════════════════════════════════════════════════════════════════════════════
# Async client
# ═══════════════════════════════════════════════════════════════════════════════


class AsyncSolrDashClient:
    """Async Python client for the SolrDash API.

    Args:
        base_url: SolrDash server URL, e.g. ``"http://localhost:3000"``.
        timeout: Request timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.

    Every method raises ``httpx.HTTPStatusError`` on a non-2xx answer; the
    response body carries ``error`` and ``detail``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        *,
        timeout: float = 60.0,
        **httpx_kwargs: Any,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            **httpx_kwargs,
        )

    async def __aenter__(self) -> AsyncSolrDashClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _get(self, path: str, params: Any = None) -> Any:
        resp = await self._client.get(f"{API_PREFIX}{path}", params=params)
        resp.raise_for_status()
        return resp.json()

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        resp = await self._client.post(f"{API_PREFIX}{path}", json=payload)
        resp.raise_for_status()
        return resp.json()

    # ── Config & connection ──

    async def config(self) -> dict[str, Any]:
        """Return ``solrUrl``, ``solrCore`` and ``showUniqueValues``."""
        return cast(dict[str, Any], await self._get("/config"))

    async def test_connection(self) -> bool:
        """Return whether the server can reach Solr."""
        data = await self._get("/connection", params={"action": "test"})
        return bool(data.get("connected", False))

    async def core_info(self) -> dict[str, Any]:
        """Return Solr's ``/admin/system`` document."""
        return cast(dict[str, Any], await self._get("/connection", params={"action": "info"}))

    async def schema(self) -> dict[str, Any]:
        """Return the core's schema document."""
        return cast(dict[str, Any], await self._get("/connection", params={"action": "schema"}))

    # ── Query ──

    async def query(self, q: str = "*:*", **params: Any) -> QueryResult:
        """Run a query.

        Args:
            q: Main query.
            **params: Any other ``QueryParameters`` field: ``fq``, ``sort``,
                ``start``, ``rows``, ``fl``, ``facet``, ``facet_field``,
                ``facet_limit``, ``facet_mincount``, ``wt``.  ``None``
                values are not sent.

        Returns:
            Solr's response as a dict.
        """
        payload: dict[str, Any] = {"q": q}
        for key, value in params.items():
            if value is not None:
                payload[_DOTTED.get(key, key)] = value
        return cast(QueryResult, await self._post("/query", payload))

    async def unique_values(
        self,
        field: str | None = None,
        *,
        limit: int = 100,
        mincount: int = 1,
    ) -> ValueCounts:
        """List distinct values of ``field`` (server default when omitted)."""
        params: dict[str, Any] = {"limit": limit, "mincount": mincount}
        if field:
            params["field"] = field
        return cast(ValueCounts, await self._get("/values", params=params))

    # ── Delete ──

    async def delete_by_id(self, doc_id: str) -> DeleteResult:
        """Delete the document with ``doc_id``."""
        return cast(DeleteResult, await self._post("/delete", {"id": doc_id}))

    async def delete_by_hash(self, hash_value: str) -> DeleteResult:
        """Delete every document whose hash field equals ``hash_value``."""
        return cast(DeleteResult, await self._post("/delete", {"hash": hash_value}))


# ═══════════════════════════════════════════════════════════════════════════════
# Sync client (wraps AsyncSolrDashClient)
# ═══════════════════════════════════════════════════════════════════════════════


class SolrDashClient:
    """Synchronous Python client for the SolrDash API.

    Wraps :class:`AsyncSolrDashClient` using ``asyncio.run``.

    Example::

        client = SolrDashClient("http://localhost:3000")
        if client.test_connection():
            print(client.query(q="type:error", rows=5)["response"]["numFound"])
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        *,
        timeout: float = 60.0,
        **httpx_kwargs: Any,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs

    def _run(self, coro: Coroutine[Any, Any, _T]) -> _T:
        """Run an async coroutine synchronously."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            # Already inside an event loop (e.g. Jupyter), run in a worker thread
            import concurrent.futures

            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
                return pool.submit(asyncio.run, coro).result()
        return asyncio.run(coro)

    def _make_client(self) -> AsyncSolrDashClient:
        return AsyncSolrDashClient(
            self._base_url,
            timeout=self._timeout,
            **self._httpx_kwargs,
        )

    def _call(self, method: str, *args: Any, **kwargs: Any) -> Any:
        async def _inner() -> Any:
            async with self._make_client() as c:
                return await getattr(c, method)(*args, **kwargs)

        return self._run(_inner())

    def config(self) -> dict[str, Any]:
        return cast(dict[str, Any], self._call("config"))

    def test_connection(self) -> bool:
        return cast(bool, self._call("test_connection"))

    def core_info(self) -> dict[str, Any]:
        return cast(dict[str, Any], self._call("core_info"))

    def schema(self) -> dict[str, Any]:
        return cast(dict[str, Any], self._call("schema"))

    def query(self, q: str = "*:*", **params: Any) -> QueryResult:
        return cast(QueryResult, self._call("query", q, **params))

    def unique_values(self, field: str | None = None, *, limit: int = 100, mincount: int = 1) -> ValueCounts:
        return cast(ValueCounts, self._call("unique_values", field, limit=limit, mincount=mincount))

    def delete_by_id(self, doc_id: str) -> DeleteResult:
        return cast(DeleteResult, self._call("delete_by_id", doc_id))

    def delete_by_hash(self, hash_value: str) -> DeleteResult:
        return cast(DeleteResult, self._call("delete_by_hash", hash_value))
