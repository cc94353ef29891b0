"""Dependency providers for the FastAPI application."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from app.config import Settings, get_settings
from app.handlers import PostSubmissionHandler
from app.rendering import FormRenderer
from app.services.posts_api import PostsApiClient


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_posts_api(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> PostsApiClient:
    """Dependency provider for PostsApiClient."""

    return PostsApiClient(client=client, settings=settings)


def get_form_renderer() -> FormRenderer:
    return FormRenderer()


async def get_post_submission_handler(
    posts_api: PostsApiClient = Depends(get_posts_api),
    renderer: FormRenderer = Depends(get_form_renderer),
) -> PostSubmissionHandler:
    """Dependency provider for PostSubmissionHandler."""

    return PostSubmissionHandler(posts_api=posts_api, renderer=renderer)
