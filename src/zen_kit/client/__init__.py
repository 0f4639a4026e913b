"""HTTP clients for the Zen notes API."""

from .async_client import AsyncClient
from .base import BaseClient

__all__ = ["AsyncClient", "BaseClient"]
