# repair_portal/core/errors.py
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from starlette.exceptions import HTTPException as StarletteHTTPException

from repair_portal.core.validation import FieldError


class PortalError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"status": "error", "message": self.message}


class ValidationFailed(PortalError):
    """One or more submitted fields broke a rule."""

    def __init__(self, errors: list[FieldError]):
        super().__init__("Validation failed")
        self.errors = errors

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["errors"] = [e.to_dict() for e in self.errors]
        return payload


class NotFound(PortalError):
    """A ticket or worker id is unknown."""

    status_code = 404


class MissingParameter(PortalError):
    """A required request parameter was not supplied."""


def _field_from_loc(loc: tuple) -> str:
    names = [str(part) for part in loc if part != "body" and not isinstance(part, int)]
    return names[-1] if names else "body"


ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_body(
    model: type[ModelT],
    data: Mapping[str, Any] | None,
    rules: Callable[[Mapping[str, Any]], list[FieldError]],
) -> ModelT:
    """Check ``data`` against both the field rules and the closed schema.

    Every violated field is reported once: rule errors first, then schema
    errors (unknown keys, wrong types) for fields the rules did not flag.
    """
    data = data or {}
    errors = rules(data)
    reported = {e.field for e in errors}
    parsed = None
    try:
        parsed = model.model_validate(data)
    except SchemaError as exc:
        for err in exc.errors():
            field = _field_from_loc(tuple(err.get("loc", ())))
            if field not in reported:
                errors.append(FieldError(field, err.get("msg", "Invalid value")))
                reported.add(field)
    if errors:
        raise ValidationFailed(errors)
    return parsed


async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [FieldError(_field_from_loc(tuple(err.get("loc", ()))), err.get("msg", "Invalid value"))
              for err in exc.errors()]
    return await portal_error_handler(request, ValidationFailed(errors))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)


__all__ = [
    "PortalError",
    "ValidationFailed",
    "NotFound",
    "MissingParameter",
    "parse_body",
    "register_exception_handlers",
]
