"""Exception handlers producing a uniform JSON error body."""
from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.services.llm.base import LLMClientError

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    message: str
    details: Optional[Dict[str, str]] = None


def error_response(status_code: int, error: str, message: str, details: Optional[Dict[str, str]] = None) -> JSONResponse:
    body = ErrorResponse(status=status_code, error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details: Dict[str, str] = {}
        for error in exc.errors():
            location = [str(part) for part in error.get("loc", ()) if part != "body"]
            details[".".join(location) or "body"] = error.get("msg", "invalid value")
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            "Invalid request parameters",
            details,
        )

    @app.exception_handler(LLMClientError)
    async def llm_error_handler(request: Request, exc: LLMClientError) -> JSONResponse:
        logger.error("LLM provider %s failed: %s", exc.provider, exc.message)
        return error_response(
            status.HTTP_502_BAD_GATEWAY,
            "Bad Gateway",
            "The language model provider could not complete the request",
            {"provider": exc.provider},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
        )
