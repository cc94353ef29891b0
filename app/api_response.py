"""Parsing of error payloads returned by the Posts API.

The Posts API answers a rejected submission with a body shaped like::

    {"error": {"details": [{"path": "title", "message": "..."}], ...}}

The payload is external and loosely specified, so every check here is
structural and fails closed: anything that does not conform is treated as a
generic failure by the caller.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterable, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    StrictStr,
    Tag,
    ValidationError,
)

from app.models import FieldErrors

FORM_FIELDS = ("title", "content", "author", "cover")


class ValidationDetail(BaseModel):
    """One field-level complaint from the Posts API."""

    path: StrictStr
    message: StrictStr


class ValidationApiError(BaseModel):
    """Error variant carrying field-level validation details."""

    model_config = ConfigDict(extra="allow")

    details: list[ValidationDetail]


class OtherApiError(BaseModel):
    """Any other error object the Posts API may return."""

    model_config = ConfigDict(extra="allow")


def _api_error_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        return "validation" if "details" in value else "other"
    if isinstance(value, ValidationApiError):
        return "validation"
    if isinstance(value, OtherApiError):
        return "other"
    return None


ApiError = Annotated[
    Union[
        Annotated[ValidationApiError, Tag("validation")],
        Annotated[OtherApiError, Tag("other")],
    ],
    Discriminator(_api_error_kind),
]


class ApiErrorResponse(BaseModel):
    """Top-level error envelope."""

    model_config = ConfigDict(extra="allow")

    error: ApiError


def parse_api_error_response(body: Any) -> ApiErrorResponse | None:
    """Return the parsed envelope, or ``None`` when ``body`` does not conform."""

    try:
        return ApiErrorResponse.model_validate(body)
    except ValidationError:
        return None


def is_api_response_error(body: Any) -> bool:
    return parse_api_error_response(body) is not None


def has_validation_errors(error: Any) -> bool:
    return isinstance(error, ValidationApiError)


def is_valid_form_data_key(key: Any) -> bool:
    return isinstance(key, str) and key in FORM_FIELDS


def field_errors_from_details(details: Iterable[ValidationDetail]) -> FieldErrors:
    """Map validation details onto form fields, dropping unknown paths."""

    errors: dict[str, str] = {}
    for detail in details:
        if is_valid_form_data_key(detail.path):
            errors[detail.path] = detail.message
    return FieldErrors(**errors)


def field_errors_from_api_body(body: Any) -> FieldErrors:
    """Translate a Posts API error body into form errors.

    Validation payloads are mapped per field. Everything else, including a
    missing body, yields the generic message on every field.
    """

    response = parse_api_error_response(body)
    if response is not None and has_validation_errors(response.error):
        return field_errors_from_details(response.error.details)
    return FieldErrors.generic()
