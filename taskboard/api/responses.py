"""Response envelopes and exception handlers for the JSON API.

Every response carries a `code` mirroring the HTTP status. Failures add a
`message`, and validation failures an `errors` mapping of field -> messages.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.errors import REQUIRED_MESSAGE, NotFoundError, TaskboardError, ValidationError

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Some errors were found."

_REQUIRED_TYPES = {"missing", "string_too_short"}


def ok(data=None, message: str | None = None) -> dict:
    body: dict = {"code": 200}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def fail(status_code: int, message: str = FAILURE_MESSAGE, errors: dict | None = None):
    body: dict = {"code": status_code, "message": message}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


def _field_name(loc: tuple) -> str:
    # integer parts are list indices or JSON decode positions
    parts = [p for p in loc if isinstance(p, str) and p not in ("body", "path", "query")]
    if parts:
        return parts[0]
    return str(loc[0]) if loc else "body"


def _message(err: dict) -> str:
    if err["type"] in _REQUIRED_TYPES:
        return REQUIRED_MESSAGE
    if err["type"] == "string_type" and err.get("input") is None:
        return REQUIRED_MESSAGE
    return err["msg"]


def _required_body_fields(request: Request) -> list[str]:
    """Required fields of the route's body model, for a request sent without a body."""
    body_field = getattr(request.scope.get("route"), "body_field", None)
    model = getattr(getattr(body_field, "field_info", None), "annotation", None)
    if not isinstance(model, type) or not issubclass(model, BaseModel):
        return []
    return [name for name, info in model.model_fields.items() if info.is_required()]


def field_errors(
    exc: RequestValidationError, request: Request | None = None
) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        if tuple(err["loc"]) == ("body",) and err["type"] == "missing" and request is not None:
            required = _required_body_fields(request)
            if required:
                for name in required:
                    errors.setdefault(name, [REQUIRED_MESSAGE])
                continue
        messages = errors.setdefault(_field_name(tuple(err["loc"])), [])
        msg = _message(err)
        if msg not in messages:
            messages.append(msg)
    return errors


def install(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return fail(422, errors=field_errors(exc, request))

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return fail(422, errors={exc.field: [exc.message]})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return fail(404, message=str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            return fail(exc.status_code)
        return fail(exc.status_code, message=str(exc.detail))

    @app.exception_handler(TaskboardError)
    async def domain_handler(request: Request, exc: TaskboardError):
        logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
        return fail(500)

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
        return fail(500)
