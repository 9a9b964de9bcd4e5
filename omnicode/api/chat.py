"""Chat gateway endpoint: one POST per conversation turn."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from omnicode.api.deps import error_response, get_chat_gateway, with_cors
from omnicode.models.message import ChatRequest
from omnicode.services.gateway import ChatGateway

router = APIRouter()

ALLOWED_METHODS = "POST, OPTIONS"


@router.options("")
async def chat_preflight(request: Request):
    return with_cors(request, Response(status_code=204), ALLOWED_METHODS)


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"])
async def chat_method_not_allowed(request: Request):
    response = PlainTextResponse("Method Not Allowed. Use POST.", status_code=405)
    response.headers["Allow"] = ALLOWED_METHODS
    return with_cors(request, response, ALLOWED_METHODS)


@router.post("")
async def chat(request: Request, gateway: ChatGateway = Depends(get_chat_gateway)):
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        chat_request = ChatRequest.from_payload(payload)
        agent_message = await gateway.handle(chat_request, request.headers.get("authorization"))
    except Exception as e:
        return with_cors(request, error_response(e), ALLOWED_METHODS)

    return with_cors(request, JSONResponse(agent_message.model_dump()), ALLOWED_METHODS)
