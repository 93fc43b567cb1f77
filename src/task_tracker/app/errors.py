from __future__ import annotations

from typing import TypeVar, Union

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_tracker.domain.errors import NotFound, ValidationError

T = TypeVar("T")


def unwrap(result: Union[T, NotFound, ValidationError]) -> T:
    """Turn a service result into a response value or an HTTP error."""
    if isinstance(result, NotFound):
        raise HTTPException(status_code=404, detail=result.message)
    if isinstance(result, ValidationError):
        raise HTTPException(status_code=400, detail={"field": result.field, "message": result.message})
    return result


def _first_error(exc: RequestValidationError) -> ValidationError:
    errors = exc.errors()
    if not errors:
        return ValidationError(field="body", message="invalid request")
    err = errors[0]
    # loc looks like ("body", "priority"), ("query", "status") or ("body", 7) for bad JSON
    loc = tuple(err.get("loc", ())) or ("body",)
    names = [part for part in loc if isinstance(part, str) and part not in ("body", "query", "path")]
    field = ".".join(names) or str(loc[0])
    return ValidationError(field=field, message=str(err.get("msg", "invalid value")))


def _error_body(error: ValidationError) -> dict:
    return {"detail": error.message, "field": error.field}


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def _http_error(request: Request, exc: HTTPException):
        # domain validation errors carry a field
        if isinstance(exc.detail, dict):
            body = {"detail": exc.detail.get("message"), "field": exc.detail.get("field")}
        else:
            body = {"detail": exc.detail}
        return JSONResponse(body, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _request_invalid(request: Request, exc: RequestValidationError):
        return JSONResponse(_error_body(_first_error(exc)), status_code=400)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        return JSONResponse({"detail": str(exc) or exc.__class__.__name__}, status_code=500)
