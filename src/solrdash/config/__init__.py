"""Configuration — process-wide settings loaded once at startup."""

from solrdash.config.settings import ObservabilitySettings, ServerSettings, Settings, SolrSettings, load_settings

__all__ = ["ObservabilitySettings", "ServerSettings", "Settings", "SolrSettings", "load_settings"]
