from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from csterms.models.terms import ErrorResponse


class TermsAPIError(Exception):
    """Request-level error rendered as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def terms_api_error_handler(request: Request, exc: TermsAPIError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )
