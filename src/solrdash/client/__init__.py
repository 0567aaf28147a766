"""SolrDash Python SDK — Client library for the SolrDash API.

Provides both async and sync clients for interacting with a SolrDash server.

Quick start::

    from solrdash.client import SolrDashClient

    client = SolrDashClient("http://localhost:3000")

    result = client.query(q="type:error", rows=5, fq=["hash:prod"])
    envs = client.unique_values("hash")
    client.delete_by_id("doc-123")
"""

from solrdash.client.client import AsyncSolrDashClient, SolrDashClient

__all__ = ["AsyncSolrDashClient", "SolrDashClient"]
