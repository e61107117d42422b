"""Control plane API client"""

from .client import APIError, Client, UnauthorizedError

__all__ = ["APIError", "Client", "UnauthorizedError"]
