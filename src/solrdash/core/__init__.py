"""Dashboard core — operations behind the HTTP API."""
