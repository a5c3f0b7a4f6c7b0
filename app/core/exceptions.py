"""
Portfolio API - Custom Exceptions
"""

from typing import Optional, Dict, Any
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse


class PortfolioException(HTTPException):
    """Base exception for Portfolio API."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code
        self.extra = extra or {}


class NotFoundError(PortfolioException):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str = None):
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} '{identifier}' not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND"
        )


class QueryError(PortfolioException):
    """Data store query failed. The raw store message is passed through."""

    def __init__(self, detail: str, table: str = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="QUERY_ERROR",
            extra={"table": table}
        )


class ConfigurationError(PortfolioException):
    """Required setting missing."""

    def __init__(self, setting: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{setting} is not set.",
            error_code="CONFIGURATION_ERROR",
            extra={"setting": setting}
        )


def error_message(exc: BaseException) -> str:
    """
    Message of a failure as the client should see it.

    postgrest's APIError keeps the server message on `.message`; str() of it
    is a dict dump, so prefer the attribute when present.
    """
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render every HTTPException as {"error": <detail>}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )
