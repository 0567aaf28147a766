"""Dashboard API endpoints."""
