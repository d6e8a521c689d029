"""Error types and the exception handlers that render them as JSON."""

from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schemas import VALIDATION_MESSAGES, REQUIRED_FIELDS


class CatalogError(Exception):
    """An error that maps directly to an HTTP response.

    The body is ``{"message": message, **extra}``.
    """

    def __init__(self, status_code: int, message: str, **extra: Any):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.extra = extra

    @classmethod
    def not_found(cls) -> "CatalogError":
        return cls(404, "Product not found")

    @classmethod
    def server_error(cls, message: str, exc: Exception) -> "CatalogError":
        return cls(500, message, error=str(exc))

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, **self.extra}


def _field_name(loc: Sequence[Any]) -> Optional[str]:
    # ("body", "name") -> "name"; ("query", "page") -> "page"
    for part in reversed(loc):
        if isinstance(part, str) and part not in ("body", "query", "path"):
            return part
    return None


def validation_messages(errors: Sequence[Dict[str, Any]]) -> List[str]:
    """Turn pydantic error dicts into one readable message per failure."""
    messages = []
    for err in errors:
        field = _field_name(err.get("loc", ()))
        err_type = err.get("type", "")
        known = VALIDATION_MESSAGES.get(field, {})

        is_blank = err_type in ("missing", "string_too_short") or ("input" in err and err["input"] is None)
        if field in REQUIRED_FIELDS and is_blank:
            message = known["required"]
        elif err_type in known:
            message = known[err_type]
        elif field:
            message = f"Invalid value for {field}: {err.get('msg', 'invalid')}"
        else:
            message = err.get("msg", "Invalid request")

        if message not in messages:
            messages.append(message)
    return messages


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error", "errors": validation_messages(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
