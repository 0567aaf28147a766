"""Base adapter interface — Abstract class for search backend connectors."""

from solrdash.adapters.base.adapter import SearchBackend
from solrdash.adapters.base.exceptions import AdapterError, BackendUnavailableError

__all__ = ["AdapterError", "BackendUnavailableError", "SearchBackend"]
