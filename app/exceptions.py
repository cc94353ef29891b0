"""Custom exceptions shared across services."""

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures."""

    message: str
    code: str = "service_error"
    status_code: int | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class PostsApiError(ServiceError):
    """Raised when the Posts API rejects or fails to accept a new post.

    ``body`` holds the decoded JSON error payload when the API answered with
    one, and ``None`` for transport failures or non-JSON responses.
    """

    code: str = "posts_api_error"
    body: Any = None
