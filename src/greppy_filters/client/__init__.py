"""Backend data-fetch client."""

from .backend import BackendClient

__all__ = ["BackendClient"]
