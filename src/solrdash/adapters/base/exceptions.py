"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""

    code = "adapter_error"


class BackendUnavailableError(AdapterError):
    """Raised when the search backend cannot be reached or answers with an error.

    Covers transport failures, timeouts, non-2xx responses and bodies that
    cannot be decoded.  The message of the underlying error is preserved so
    operators can see what went wrong.
    """

    code = "backend_unavailable"


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""

    code = "configuration_error"
