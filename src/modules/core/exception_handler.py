"""DRF exception handler rendering every error in one envelope.

Response body::

    {
        "type": "client_error",
        "errors": [{"code": "not_found", "detail": "...", "attr": null}]
    }

Domain exceptions from the Service Layer and pydantic validation errors
raised while building DTOs are translated here, so views never need to
catch them one by one.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.core.exceptions import (
    BusinessRuleViolation,
    Conflict,
    DomainError,
    NotFound,
)

logger = structlog.get_logger(__name__)

_DOMAIN_STATUS = (
    (NotFound, status.HTTP_404_NOT_FOUND),
    (Conflict, status.HTTP_409_CONFLICT),
    (BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
)


def _envelope(errors: List[Dict[str, Any]], status_code: int) -> Dict[str, Any]:
    error_type = "server_error" if status_code >= 500 else "client_error"
    return {"type": error_type, "errors": errors}


def _flatten_drf_detail(
    detail: Any, default_code: str, attr: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Turn nested DRF ``ErrorDetail`` structures into a flat error list."""
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            child = key if attr is None else f"{attr}.{key}"
            if key == "non_field_errors":
                child = attr
            errors.extend(_flatten_drf_detail(value, default_code, child))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten_drf_detail(item, default_code, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", None) or default_code,
            "detail": str(detail),
            "attr": attr,
        }
    ]


def _pydantic_errors(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    errors = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ())) or None
        errors.append(
            {
                "code": error.get("type", "invalid"),
                "detail": error.get("msg", "Invalid value."),
                "attr": loc,
            }
        )
    return errors


def standardized_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    """Entry point configured as ``REST_FRAMEWORK['EXCEPTION_HANDLER']``."""
    if isinstance(exc, DomainError):
        status_code = status.HTTP_400_BAD_REQUEST
        for exc_class, mapped in _DOMAIN_STATUS:
            if isinstance(exc, exc_class):
                status_code = mapped
                break
        logger.info(
            "api.domain_error",
            error=type(exc).__name__,
            detail=str(exc),
            status_code=status_code,
        )
        body = _envelope(
            [{"code": exc.code, "detail": str(exc), "attr": None}], status_code
        )
        return Response(body, status=status_code)

    if isinstance(exc, PydanticValidationError):
        return Response(
            _envelope(_pydantic_errors(exc), status.HTTP_400_BAD_REQUEST),
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    default_code = (
        exc.default_code if isinstance(exc, APIException) else "error"
    )
    errors = _flatten_drf_detail(response.data, default_code)
    # ``detail`` at the top level is DRF's own wrapper, not a field name.
    for error in errors:
        if error["attr"] == "detail":
            error["attr"] = None
    response.data = _envelope(errors, response.status_code)
    return response
