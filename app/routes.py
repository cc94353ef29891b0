"""HTTP routes for the create-post page."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from app.dependencies import get_post_submission_handler
from app.handlers import PostSubmissionHandler

router = APIRouter()

Handler = Annotated[PostSubmissionHandler, Depends(get_post_submission_handler)]


@router.get("/create", response_class=HTMLResponse)
async def create_form(request: Request, handler: Handler) -> Response:
    return await handler.get(request)


@router.post("/create", response_class=HTMLResponse)
async def create_post(request: Request, handler: Handler) -> Response:
    return await handler.post(request)
