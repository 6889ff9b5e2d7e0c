"""
Response envelope helpers.

Every contact endpoint answers with ``{status, data, error?, msg?}``.
Validation failures are the exception: they keep the
``{errors: [...]}`` body built by ``validation_errors_body`` so
clients that inspect per-field messages keep working.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from fastapi import status
from fastapi.responses import JSONResponse

from contacts_api.app.core.errors import (
    ConflictError,
    ContactError,
    NotFoundError,
    Result,
    ValidationError,
)


class AppStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"


_ERROR_STATUS = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
)


def status_for(error: ContactError, not_found: int = status.HTTP_404_NOT_FOUND) -> int:
    """Map an error to its HTTP status code.

    ``not_found`` overrides the code used for ``NotFoundError``; the
    update endpoint reports a missing contact as 400.
    """
    if isinstance(error, NotFoundError):
        return not_found
    for error_cls, code in _ERROR_STATUS:
        if isinstance(error, error_cls):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def success(data: Any, msg: Optional[str] = None) -> JSONResponse:
    body: Dict[str, Any] = {"status": AppStatus.SUCCESS.value, "data": data}
    if msg is not None:
        body["msg"] = msg
    return JSONResponse(status_code=status.HTTP_200_OK, content=body)


def failure(error: ContactError, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": AppStatus.FAILED.value, "data": None, "error": error.message},
    )


def render(result: Result, not_found: int = status.HTTP_404_NOT_FOUND) -> JSONResponse:
    """Turn a service ``Result`` into the enveloped HTTP response."""
    if not result.ok:
        return failure(result.error, status_for(result.error, not_found=not_found))
    value = result.value
    if isinstance(value, list):
        data = [item.to_json() for item in value]
    else:
        data = value.to_json()
    return success(data, msg=result.msg)


def validation_errors_body(errors: Sequence[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Reshape pydantic errors into ``{errors: [...]}``.

    Each item carries ``type``, ``value``, ``msg``, ``path`` and
    ``location`` (``body``, ``path``...).
    """
    items = []
    for err in errors:
        loc = list(err.get("loc", ()))
        location = str(loc[0]) if loc else "body"
        items.append(
            {
                "type": "field",
                "value": None if err.get("type") == "missing" else err.get("input"),
                "msg": err.get("msg", ""),
                "path": ".".join(str(part) for part in loc[1:]),
                "location": location,
            }
        )
    return {"errors": items}
