"""Dashboard operation errors.

Each error carries a machine-readable ``code`` and the HTTP status the API
layer answers with.  Backend failures are not listed here; they surface as
``solrdash.adapters.base.exceptions.BackendUnavailableError``.
"""


class DashboardError(Exception):
    """Base exception for dashboard operations."""

    code = "dashboard_error"
    status_code = 500


class InvalidInputError(DashboardError):
    """Raised for bad types, missing required fields or out-of-range values."""

    code = "invalid_input"
    status_code = 400


class InvalidActionError(InvalidInputError):
    """Raised when ``/connection`` gets an action other than test, info or schema."""

    code = "invalid_action"


class NotFoundError(DashboardError):
    """Raised when a delete target matches no documents."""

    code = "not_found"
    status_code = 404
