"""예외 → HTTP 오류 응답 매핑.

응답 본문 형태: {message, status, error, timestamp, path}
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_manager.domain.exceptions import InvalidInputError, PostNotFoundError
from blog_manager.presentation.web.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        status=status_code,
        error=error,
        timestamp=datetime.now(timezone.utc),
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


async def post_not_found_handler(request: Request, exc: PostNotFoundError):
    logger.info(f"게시물 없음: {request.method} {request.url.path} (id={exc.post_id})")
    return error_response(request, 404, "Not Found", str(exc))


async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.info(f"입력값 오류: {request.method} {request.url.path} - {exc}")
    return error_response(request, 400, "Validation Error", str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = f"Validation failed: {_format_validation_errors(exc)}"
    logger.info(f"요청 스키마 위반: {request.method} {request.url.path} - {message}")
    return error_response(request, 400, "Constraint Violation", message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    try:
        reason = HTTPStatus(exc.status_code).phrase
    except ValueError:
        reason = "Error"
    return error_response(request, exc.status_code, reason, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    # 내부 정보는 응답에 노출하지 않는다
    logger.exception(f"처리되지 않은 예외: {request.method} {request.url.path}")
    return error_response(request, 500, "Internal Server Error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostNotFoundError, post_not_found_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
