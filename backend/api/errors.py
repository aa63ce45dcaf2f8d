"""
Exception handlers for the FastAPI application.

Domain exceptions are translated into the platform's JSON error body:
``{"error", "code", "status_code", "details"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from content_safety.policy import ContentSafetyBlockedError
from schemas.api import BlockedDetails, ErrorResponse

logger = logging.getLogger(__name__)

CONTENT_SAFETY_BLOCK_MESSAGE = (
    "Seu conteúdo contém informações sensíveis que não podem ser compartilhadas"
)


async def content_safety_blocked_handler(
    request: Request, exc: ContentSafetyBlockedError
) -> JSONResponse:
    result = exc.result
    logger.warning(
        "Rejected %s %s: risk=%s score=%d",
        request.method,
        request.url.path,
        result.risk_level.value,
        result.score,
    )
    body = ErrorResponse(
        error=CONTENT_SAFETY_BLOCK_MESSAGE,
        code="CONTENT_SAFETY_BLOCK",
        status_code=400,
        details=BlockedDetails(
            risk_level=result.risk_level,
            score=result.score,
            suggestions=list(result.suggestions),
        ),
    )
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers with the application."""
    app.add_exception_handler(ContentSafetyBlockedError, content_safety_blocked_handler)
