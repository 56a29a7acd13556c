from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Any, Iterable, Optional

from . import messages

# pydantic error types that mean "value above the upper bound"
_OVER_MAX_TYPES = {"string_too_long", "too_long", "less_than_equal", "less_than"}
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class ApplicationError(Exception):
    """Base class for client-caused application errors"""

    status_code = status.HTTP_400_BAD_REQUEST
    message = messages.INVALID_INPUT


class DuplicateApplicationError(ApplicationError):
    """Phone number already applied to the same generation"""

    message = messages.DUPLICATE_APPLICATION

    def __init__(self, phone: str, generation: int):
        super().__init__(f"Duplicate application for generation {generation}")
        self.phone = phone
        self.generation = generation


class ApplicationNotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    message = messages.APPLICATION_NOT_FOUND

    def __init__(self, application_id: str):
        super().__init__(f"Application not found: {application_id}")
        self.application_id = application_id


def error_response(
    status_code: int,
    error: str,
    details: Optional[list[dict[str, str]]] = None,
) -> JSONResponse:
    """
    Return the error body shared by every endpoint

    {"error": str} or {"error": str, "details": [{"field": str, "message": str}]}
    """
    content: dict[str, Any] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def application_error_response(exc: ApplicationError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


def validation_details(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Convert pydantic error dicts into [{field, message}] with localized messages

    The request location prefix ("body", "query") is dropped from the field path.
    Errors on an element inside a field (e.g. interests.0) use the field's
    "element" message. Anything without a localized message keeps pydantic's
    own message.
    """
    details = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc)

        field_messages = messages.FIELD_MESSAGES.get(str(loc[0]) if loc else "", {})
        if len(loc) > 1:
            message = field_messages.get("element") or err.get("msg", "")
        else:
            kind = "over_max" if err.get("type") in _OVER_MAX_TYPES else "default"
            message = field_messages.get(kind) or field_messages.get("default") or err.get("msg", "")

        details.append({"field": field, "message": message})
    return details


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reshape FastAPI request validation failures into the 400 field-list body"""
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        messages.INVALID_INPUT,
        details=validation_details(exc.errors()),
    )
