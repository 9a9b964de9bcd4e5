"""Shared dependencies and response helpers for the gateway routers."""

import logging
from functools import lru_cache

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from omnicode.core.config import settings
from omnicode.core.errors import GENERIC_SERVER_ERROR, GatewayError
from omnicode.services.gateway import ChatGateway
from omnicode.services.identity import get_identity_verifier
from omnicode.services.llm import get_llm_provider
from omnicode.services.sessions import get_session_store

logger = logging.getLogger(__name__)


@lru_cache
def get_chat_gateway() -> ChatGateway:
    return ChatGateway(
        llm=get_llm_provider(),
        identity=get_identity_verifier(),
        store=get_session_store(),
    )


def with_cors(request: Request, response: Response, methods: str) -> Response:
    """Grant cross-origin reads only to allow-listed origins."""
    origin = request.headers.get("origin")
    if origin and origin in settings.cors_origins:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Vary"] = "Origin"
    response.headers["Access-Control-Allow-Methods"] = methods
    response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
    return response


def error_response(exc: Exception) -> JSONResponse:
    if isinstance(exc, GatewayError):
        if exc.status_code >= 500:
            logger.error(f"Gateway failure ({exc.kind.value}): {exc}", exc_info=exc)
        else:
            logger.info(f"Request rejected ({exc.kind.value}): {exc}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    logger.exception(f"Unhandled gateway failure: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"status": "error", "message": GENERIC_SERVER_ERROR, "details": str(exc)},
    )
