"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from solrdash.core.service import DashboardService

# Global service instance (set during application lifespan)
_service: DashboardService | None = None


def set_service(service: DashboardService | None) -> None:
    """Set the global service instance (called during app lifespan)."""
    global _service
    _service = service


def get_service() -> DashboardService:
    """Get the global dashboard service instance.

    Returns:
        The initialized DashboardService.

    Raises:
        RuntimeError: If the service is not initialized.
    """
    if _service is None:
        raise RuntimeError("SolrDash service not initialized. Is the server running?")
    return _service
