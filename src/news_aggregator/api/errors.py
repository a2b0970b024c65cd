"""
Unified error handling for consistent API error responses.

All API errors use this format:
{
    "error": {
        "code": "ERROR_CODE",
        "message": "Human-readable message",
        "detail": "Optional additional context"
    }
}
"""

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class APIError(HTTPException):
    """Base API error class for consistent error responses."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.code = code
        self.message = message
        self.error_detail = detail
        super().__init__(
            status_code=status_code,
            detail={"code": code, "message": message, "detail": detail},
            headers=headers,
        )


class InvalidCategoryAPIError(APIError):
    """Unknown news category (400)."""

    def __init__(self, category: str, categories: tuple[str, ...]):
        super().__init__(
            status_code=400,
            code="INVALID_CATEGORY",
            message=f"Invalid category: {category}",
            detail=f"Expected one of: {', '.join(categories)}",
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    FastAPI exception handler for APIError.

    Converts APIError exceptions to consistent JSON responses.
    """
    content = {
        "error": {
            "code": exc.code,
            "message": exc.message,
        }
    }
    if exc.error_detail:
        content["error"]["detail"] = exc.error_detail

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
    )
