"""Global exception handler (problem-details responses).

The single place where failures become HTTP responses.  Wired through
``REST_FRAMEWORK["EXCEPTION_HANDLER"]``; handlers and repositories raise,
this module decides status code and body.

Body shape: ``{"title", "status", "errors"?, "detail"?}`` served as
``application/problem+json``.  Unclassified errors only expose their
traceback when ``APP_ENV`` is ``development``.
"""

from __future__ import annotations

import traceback
from http import HTTPStatus
from typing import Any, Dict, List, Optional

import structlog
from django.conf import settings
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_pascal, to_snake
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import InvalidArgument, NotFound, ValidationFailure

logger = structlog.get_logger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"
GENERIC_SERVER_ERROR = "An unexpected error occurred on the server."


def _problem(
    title: str,
    status_code: int,
    *,
    errors: Optional[Dict[str, List[str]]] = None,
    detail: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    body: Dict[str, Any] = {"title": title, "status": status_code}
    if errors is not None:
        body["errors"] = errors
    if detail is not None:
        body["detail"] = detail
    return Response(
        body,
        status=status_code,
        headers=headers,
        content_type=PROBLEM_CONTENT_TYPE,
    )


def pydantic_errors_by_field(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """Group Pydantic errors by top-level field, PascalCase ("General" if none)."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = to_pascal(to_snake(str(loc[0]))) if loc else "General"
        errors.setdefault(field, []).append(error["msg"])
    return errors


def _request_info(context: Dict[str, Any]) -> Dict[str, Any]:
    request = context.get("request")
    if request is None:
        return {}
    return {"method": request.method, "path": request.path}


def problem_details_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Translate any exception raised by a view into a problem-details response."""
    info = _request_info(context)

    if isinstance(exc, (ValidationFailure, PydanticValidationError)):
        errors = (
            exc.errors
            if isinstance(exc, ValidationFailure)
            else pydantic_errors_by_field(exc)
        )
        logger.warning("request.validation_failed", errors=errors, exc_info=exc, **info)
        return _problem(
            "Validation error", status.HTTP_400_BAD_REQUEST, errors=errors
        )

    if isinstance(exc, InvalidArgument):
        logger.warning(
            "request.invalid_argument", field=exc.field, exc_info=exc, **info
        )
        return _problem("Invalid argument", status.HTTP_400_BAD_REQUEST, detail=str(exc))

    if isinstance(exc, NotFound):
        logger.warning("request.not_found", exc_info=exc, **info)
        return _problem("Resource not found", status.HTTP_404_NOT_FOUND, detail=str(exc))

    # Framework errors (malformed JSON, 405, 415, Http404, ...)
    response = exception_handler(exc, context)
    if response is not None:
        logger.warning(
            "request.rejected", status_code=response.status_code, exc_info=exc, **info
        )
        data = response.data
        detail = data.get("detail", data) if isinstance(data, dict) else data
        headers = {
            key: value
            for key, value in response.items()
            if key in ("Allow", "Retry-After", "WWW-Authenticate")
        }
        return _problem(
            HTTPStatus(response.status_code).phrase,
            response.status_code,
            detail=str(detail),
            headers=headers or None,
        )

    logger.error("request.unhandled_exception", exc_info=exc, **info)
    if settings.APP_ENV == "development":
        detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        detail = GENERIC_SERVER_ERROR
    return _problem(
        "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
    )
