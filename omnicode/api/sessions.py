"""Read access to the caller's stored chat session."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from omnicode.api.deps import error_response, get_chat_gateway, with_cors
from omnicode.services.gateway import ChatGateway

router = APIRouter()

ALLOWED_METHODS = "GET, OPTIONS"


@router.options("/me")
async def session_preflight(request: Request):
    return with_cors(request, Response(status_code=204), ALLOWED_METHODS)


@router.get("/me")
async def get_my_session(request: Request, gateway: ChatGateway = Depends(get_chat_gateway)):
    try:
        session = await gateway.load_session(request.headers.get("authorization"))
    except Exception as e:
        return with_cors(request, error_response(e), ALLOWED_METHODS)
    return with_cors(request, JSONResponse(session.to_response()), ALLOWED_METHODS)
