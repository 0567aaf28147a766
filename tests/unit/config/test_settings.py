"""Tests for environment and YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from solrdash.config.settings import Settings, SolrSettings

_ENV_VARS = (
    "SOLR_URL",
    "SOLR_CORE",
    "SOLR_TIMEOUT",
    "SOLR_USERNAME",
    "SOLR_PASSWORD",
    "SOLR_HASH_FIELD",
    "SHOW_UNIQUE_VALUES",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSolrSettings:
    def test_defaults(self) -> None:
        s = SolrSettings()
        assert s.url == "http://localhost:8983/solr"
        assert s.core == "your_core_name"
        assert s.timeout == 30000
        assert s.username is None
        assert s.password is None
        assert s.hash_field == "hash"
        assert s.has_credentials is False

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLR_URL", "http://solr.internal:8983/solr/")
        monkeypatch.setenv("SOLR_CORE", "logs")
        monkeypatch.setenv("SOLR_TIMEOUT", "5000")
        monkeypatch.setenv("SOLR_USERNAME", "admin")
        monkeypatch.setenv("SOLR_PASSWORD", "s3cret")

        s = SolrSettings()

        assert s.url == "http://solr.internal:8983/solr"
        assert s.core_url == "http://solr.internal:8983/solr/logs"
        assert s.timeout == 5000
        assert s.has_credentials is True

    def test_credentials_need_both_parts(self) -> None:
        assert SolrSettings(username="admin", password="").has_credentials is False
        assert SolrSettings(username="", password="x").has_credentials is False

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            SolrSettings(timeout=0)

    def test_frozen(self) -> None:
        s = SolrSettings()
        with pytest.raises(ValidationError):
            s.core = "other"  # type: ignore[misc]


class TestSettings:
    def test_show_unique_values_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHOW_UNIQUE_VALUES", "site")
        monkeypatch.setenv("SOLR_CORE", "logs")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.show_unique_values == "site"
        assert s.solr.core == "logs"

    def test_show_unique_values_blank_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHOW_UNIQUE_VALUES", "  ")
        assert Settings(_env_file=None).show_unique_values is None  # type: ignore[call-arg]

    def test_nested_server_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLRDASH_SERVER__PORT", "9090")
        assert Settings(_env_file=None).server.port == 9090  # type: ignore[call-arg]

    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "solrdash-config.yaml"
        config.write_text(
            "solr:\n"
            "  url: http://yaml-solr:8983/solr\n"
            "  core: events\n"
            "  timeout: 1000\n"
            "observability:\n"
            "  log_format: console\n"
        )

        s = Settings.from_yaml(config)

        assert s.solr.core_url == "http://yaml-solr:8983/solr/events"
        assert s.solr.timeout == 1000
        assert s.observability.log_format == "console"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "nope.yaml")

    def test_only_dashboard_sections(self) -> None:
        assert set(Settings.model_fields) == {"solr", "show_unique_values", "server", "observability"}
