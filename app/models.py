"""Pydantic models shared across application layers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

GENERIC_ERROR_MESSAGE = "there was an error creating the post"


class FormSubmission(BaseModel):
    """Fields submitted through the create-post form."""

    title: str | None = None
    content: str | None = None
    author: str | None = None
    cover: str | None = None

    def to_api_payload(self) -> dict[str, Any]:
        """JSON body for the Posts API; absent fields are left out."""

        return self.model_dump(exclude_none=True)


class FieldErrors(BaseModel):
    """Per-field error messages; an empty string means the field is fine."""

    title: str = ""
    content: str = ""
    author: str = ""
    cover: str = ""

    @classmethod
    def generic(cls) -> FieldErrors:
        return cls(
            title=GENERIC_ERROR_MESSAGE,
            content=GENERIC_ERROR_MESSAGE,
            author=GENERIC_ERROR_MESSAGE,
            cover=GENERIC_ERROR_MESSAGE,
        )

    def failing_fields(self) -> list[str]:
        return [name for name, message in self.model_dump().items() if message]
