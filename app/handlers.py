"""Request handling for the create-post page."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request, status
from starlette.datastructures import FormData
from starlette.responses import HTMLResponse, Response

from app.api_response import FORM_FIELDS, field_errors_from_api_body
from app.exceptions import PostsApiError
from app.models import FieldErrors, FormSubmission
from app.rendering import FormRenderer
from app.services.posts_api import PostsApiClient

logger = logging.getLogger(__name__)


class PostSubmissionHandler:
    """Render the create-post form and forward submissions to the Posts API."""

    def __init__(self, posts_api: PostsApiClient, renderer: FormRenderer) -> None:
        self._posts_api = posts_api
        self._renderer = renderer

    async def get(self, request: Request) -> HTMLResponse:
        return self._renderer.render(request, FieldErrors())

    async def post(self, request: Request) -> Response:
        """Create the post, then redirect; re-render with errors on failure."""

        form = await request.form()
        submission = _submission_from_form(form)

        try:
            await self._posts_api.create_post(submission)
        except PostsApiError as exc:
            errors = field_errors_from_api_body(exc.body)
            logger.info(
                "Re-rendering create form with errors",
                extra={
                    "failing_fields": errors.failing_fields(),
                    "api_status_code": exc.status_code,
                },
            )
            return self._renderer.render(request, errors)

        return Response(
            status_code=status.HTTP_303_SEE_OTHER,
            headers={"location": "/"},
        )


def _submission_from_form(form: FormData) -> FormSubmission:
    values: dict[str, Any] = {}
    for name in FORM_FIELDS:
        value = form.get(name)
        # Uploaded files are not text fields.
        values[name] = value if isinstance(value, str) else None
    return FormSubmission(**values)
