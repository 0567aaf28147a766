"""Tests for the delete endpoint."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient


class TestDeleteById:
    def test_deletes_existing_document(self, client: TestClient, fake_solr: Any) -> None:
        fake_solr.queue_select(num_found=1, docs=[{"id": "doc-1"}])

        resp = client.post("/api/solr/delete", json={"id": "doc-1"})

        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "message": 'Document "doc-1" deleted successfully',
            "deletedId": "doc-1",
        }
        assert fake_solr.select_params() == [("q", 'id:"doc-1"'), ("start", "0"), ("rows", "1"), ("wt", "json")]
        assert fake_solr.update_bodies() == [{"delete": {"query": 'id:"doc-1"'}}]

    def test_missing_document_is_404_without_delete(self, client: TestClient, fake_solr: Any) -> None:
        resp = client.post("/api/solr/delete", json={"id": "ghost"})

        assert resp.status_code == 404
        assert resp.json()["error"] == "not_found"
        assert "ghost" in resp.json()["detail"]
        assert fake_solr.requests_to("/update") == []


class TestDeleteByHash:
    def test_reports_pre_delete_count(self, client: TestClient, fake_solr: Any) -> None:
        fake_solr.queue_select(num_found=17)

        resp = client.post("/api/solr/delete", json={"hash": "staging-42"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["deletedCount"] == 17
        assert "deletedId" not in body
        assert [r.url.path.rsplit("/", 1)[-1] for r in fake_solr.requests] == ["select", "update"]
        assert fake_solr.select_params() == [("q", 'hash:"staging-42"'), ("rows", "0"), ("wt", "json")]

    def test_zero_count_is_404_without_delete(self, client: TestClient, fake_solr: Any) -> None:
        fake_solr.queue_select(num_found=0)

        resp = client.post("/api/solr/delete", json={"hash": "nothing-here"})

        assert resp.status_code == 404
        assert fake_solr.requests_to("/update") == []


class TestDeleteValidation:
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"id": "a", "hash": "b"},
            {"id": 123},
            {"hash": None},
            {"id": "   "},
            {"doc": "a"},
        ],
    )
    def test_invalid_body_is_400(self, client: TestClient, fake_solr: Any, body: dict) -> None:
        resp = client.post("/api/solr/delete", json=body)

        assert resp.status_code == 400
        assert resp.json()["error"] == "invalid_input"
        assert fake_solr.requests == []


class TestDeleteBackendFailure:
    def test_verification_failure_is_500(self, client: TestClient, fake_solr: Any) -> None:
        fake_solr.error = httpx.ConnectError("connection refused")

        resp = client.post("/api/solr/delete", json={"id": "doc-1"})

        assert resp.status_code == 500
        assert resp.json()["error"] == "backend_unavailable"
        assert "connection refused" in resp.json()["detail"]
