"""Template rendering for the create-post page."""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse

from app.models import FieldErrors

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class FormRenderer:
    """Render the create-post form for a given set of field errors.

    Output depends only on ``errors``; ``None`` renders a clean form.
    """

    template_name = "create.html"

    def __init__(self, templates: Jinja2Templates = templates) -> None:
        self._templates = templates

    def render(self, request: Request, errors: FieldErrors | None = None) -> HTMLResponse:
        errors = errors or FieldErrors()
        return self._templates.TemplateResponse(
            request,
            self.template_name,
            {"errors": errors.model_dump()},
        )
