"""Error handling utilities and custom exceptions."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional

import httpx
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger


class PromptValidationError(ValueError):
    """Raised when a prompt is empty or otherwise unusable."""


async def prompt_validation_exception_handler(
    request: Request, exc: PromptValidationError
) -> JSONResponse:
    """Convert a PromptValidationError into an HTTP 400 response."""
    logger.warning("Rejected prompt: {}", exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": str(exc)},
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request body validation failures as HTTP 400 with details."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.warning("Request validation failed: {}", details)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation Error", "details": details},
    )


def describe_error(exc: BaseException) -> str:
    """Return the most useful message carried by an upstream failure.

    Provider APIs usually put a human readable reason in the response body
    (``{"error": "..."}`` or ``{"error": {"message": "..."}}``); that is
    preferred over the exception's own text.
    """
    body: Any = None
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
    else:
        body = getattr(exc, "body", None)

    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict):
            message = error.get("message")
            if message:
                return str(message)
        elif error:
            return str(error)

    if isinstance(exc, httpx.TimeoutException):
        return f"request timed out ({exc.__class__.__name__})"
    return str(exc) or exc.__class__.__name__


def unavailable_on_error(func: Callable[..., Optional[str]]) -> Callable[..., Optional[str]]:
    """Decorator turning any failure of a provider call into ``None``.

    The wrapped method belongs to a provider adapter; the adapter's
    ``name`` is used in the log line.  Nothing raised inside the call
    reaches the caller.
    """

    @wraps(func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Optional[str]:
        try:
            return func(self, *args, **kwargs)
        except Exception as exc:
            logger.warning("{} failed: {}", getattr(self, "name", func.__name__), describe_error(exc))
            return None

    return wrapper
