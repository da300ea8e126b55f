"""Structured error responses.

Every error leaves the API as::

    {"code": "FOCUS_NOT_FOUND", "message": "...", "status": 404, "error": "..."}

Routes raise ``api_error(...)``; the handlers below render it, and map request
decoding failures to 400 instead of FastAPI's default 422.
"""
from typing import Optional
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def api_error(code: str, message: str, status_code: int, error: Optional[Exception] = None) -> HTTPException:
    """Build an HTTPException carrying the structured error body."""
    detail = {
        "code": code,
        "message": message,
        "status": status_code,
        "error": str(error) if error is not None else None,
    }
    return HTTPException(status_code=status_code, detail=detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict) and "code" in exc.detail:
        body = exc.detail
    else:
        # Framework-raised errors (unknown route, wrong method)
        body = {
            "code": "HTTP_ERROR",
            "message": str(exc.detail),
            "status": exc.status_code,
            "error": None,
        }
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={
            "code": "INVALID_REQUEST_BODY",
            "message": "Invalid request data",
            "status": 400,
            "error": problems or None,
        },
    )
