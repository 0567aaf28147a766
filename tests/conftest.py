"""Shared test fixtures and configuration."""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from solrdash.adapters.solr.adapter import SolrAdapter
from solrdash.api.app import create_app
from solrdash.api.deps import set_service
from solrdash.config.settings import Settings, SolrSettings
from solrdash.core.service import DashboardService

SOLR_URL = "http://solr.test:8983/solr"
SOLR_CORE = "test_core"


class FakeSolr:
    """In-process stand-in for a Solr core, used as an ``httpx.MockTransport`` handler.

    ``/select`` answers are taken from ``select_results`` in order (see
    ``queue_select``), falling back to an empty result.  Every request is
    recorded.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.select_results: list[dict[str, Any]] = []
        self.update_result: dict[str, Any] = {"responseHeader": {"status": 0, "QTime": 5}}
        self.system_result: dict[str, Any] = {
            "responseHeader": {"status": 0, "QTime": 1},
            "lucene": {"solr-spec-version": "9.4.0"},
            "jvm": {"name": "OpenJDK 64-Bit Server VM"},
        }
        self.schema_result: dict[str, Any] = {
            "responseHeader": {"status": 0, "QTime": 1},
            "schema": {"name": "default-config", "fields": [{"name": "id", "type": "string"}]},
        }
        self.status_code = 200
        self.raw_body: bytes | None = None
        self.error: Exception | None = None

    @staticmethod
    def select_body(num_found: int = 0, docs: list[dict[str, Any]] | None = None, **extra: Any) -> dict[str, Any]:
        """Build a Solr ``/select`` JSON body."""
        return {
            "responseHeader": {"status": 0, "QTime": 3, "params": {"q": "*:*"}},
            "response": {"numFound": num_found, "start": 0, "docs": docs or []},
            **extra,
        }

    def queue_select(self, num_found: int = 0, docs: list[dict[str, Any]] | None = None, **extra: Any) -> None:
        """Answer the next ``/select`` request with ``select_body(...)``."""
        self.select_results.append(self.select_body(num_found, docs, **extra))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json={"error": {"msg": "Solr failure", "code": self.status_code}})

        path = request.url.path
        if path.endswith("/select"):
            body = self.select_results.pop(0) if self.select_results else self.select_body()
        elif path.endswith("/update"):
            body = self.update_result
        elif path.endswith("/admin/system"):
            body = self.system_result
        elif path.endswith("/schema"):
            body = self.schema_result
        else:
            return httpx.Response(404, json={"error": {"msg": f"unknown path {path}"}})
        return httpx.Response(200, json=body)

    def requests_to(self, suffix: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(suffix)]

    def select_params(self, index: int = 0) -> list[tuple[str, str]]:
        """Query-string pairs of the ``index``-th ``/select`` request, in order."""
        return self.requests_to("/select")[index].url.params.multi_items()

    def update_bodies(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests_to("/update")]


@pytest.fixture
def solr_settings() -> SolrSettings:
    return SolrSettings(url=SOLR_URL, core=SOLR_CORE, timeout=2000)


@pytest.fixture
def settings(solr_settings: SolrSettings) -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        solr=solr_settings,
        observability={"log_level": "warning", "log_format": "console"},
    )


@pytest.fixture
def fake_solr() -> FakeSolr:
    return FakeSolr()


@pytest.fixture
def adapter(solr_settings: SolrSettings, fake_solr: FakeSolr) -> SolrAdapter:
    """Solr adapter wired to ``fake_solr`` (client created without ``initialize``)."""
    a = SolrAdapter(solr_settings)
    a._client = httpx.AsyncClient(
        base_url=solr_settings.core_url,
        transport=httpx.MockTransport(fake_solr),
    )
    return a


@pytest.fixture
def service(settings: Settings, adapter: SolrAdapter) -> DashboardService:
    return DashboardService(settings, backend=adapter)


@pytest.fixture
def client(settings: Settings, service: DashboardService) -> Iterator[TestClient]:
    """Create a test client for the API."""
    app = create_app(settings)
    set_service(service)
    yield TestClient(app)
    set_service(None)
