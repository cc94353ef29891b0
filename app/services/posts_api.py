"""Adapter for the Posts API create-post endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import Settings
from app.exceptions import PostsApiError
from app.models import FormSubmission

logger = logging.getLogger(__name__)


class PostsApiClient:
    """Wrapper around the Posts API ``/api/posts`` endpoint."""

    _path = "/api/posts"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    def endpoint(self) -> str:
        return f"{self._settings.api_base_url.rstrip('/')}{self._path}"

    async def create_post(self, submission: FormSubmission) -> None:
        """Submit a new post. Any status below 400 counts as success."""

        try:
            response = await self._client.post(
                self.endpoint,
                json=submission.to_api_payload(),
                timeout=self._settings.posts_api_timeout,
            )
            if response.is_error:
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Post creation timed out", exc_info=exc)
            raise PostsApiError("Posts API timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Post creation rejected",
                extra={
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text,
                },
            )
            raise PostsApiError(
                "Posts API returned an error",
                status_code=exc.response.status_code,
                body=_decode_body(exc.response),
            ) from exc
        except httpx.InvalidURL as exc:
            logger.error("Posts API URL is invalid", extra={"endpoint": self.endpoint})
            raise PostsApiError("Posts API URL is invalid") from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected Posts API HTTP error")
            raise PostsApiError("Posts API request failed") from exc

        logger.info(
            "Post created",
            extra={"status_code": response.status_code},
        )


def _decode_body(response: httpx.Response) -> Any:
    """Return the JSON payload of an error response, or ``None``."""

    try:
        return response.json()
    except ValueError:
        return None
