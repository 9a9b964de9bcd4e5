"""Chat gateway: authenticate, call the model with retries, persist the transcript."""

import logging

from google.genai import errors as genai_errors

from omnicode.core.config import settings
from omnicode.core.errors import (
    AuthenticationError,
    AuthorizationError,
    PersistenceError,
    UpstreamFatalError,
    UpstreamTransientError,
)
from omnicode.core.retry import RetryExhaustedError, with_exponential_backoff
from omnicode.models.message import ChatRequest, Message, MessageType
from omnicode.models.session import ChatSession
from omnicode.services.history import seed_history, to_model_history
from omnicode.services.identity.base import BaseIdentityVerifier, InvalidTokenError
from omnicode.services.llm.base import BaseLLMProvider
from omnicode.services.sessions.base import BaseSessionStore

logger = logging.getLogger(__name__)


def parse_bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise AuthenticationError("No authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise AuthenticationError("Authorization header is not a bearer token")
    return token.strip()


class ChatGateway:
    """Handles one chat round trip.

    Holds no per-request state, so a single instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        llm: BaseLLMProvider,
        identity: BaseIdentityVerifier,
        store: BaseSessionStore,
        max_retries: int | None = None,
        base_delay: float | None = None,
        system_instruction: str | None = None,
    ):
        self.llm = llm
        self.identity = identity
        self.store = store
        self.max_retries = max_retries if max_retries is not None else settings.retry_max_attempts
        self.base_delay = base_delay if base_delay is not None else settings.retry_base_delay
        self.system_instruction = system_instruction or settings.system_instruction

    async def authenticate(self, authorization: str | None) -> str:
        """Verify the bearer token and return its uid."""
        token = parse_bearer_token(authorization)
        try:
            return await self.identity.verify(token)
        except InvalidTokenError as e:
            raise AuthenticationError(f"Invalid ID token: {e}") from e

    async def handle(self, request: ChatRequest, authorization: str | None) -> Message:
        uid = await self.authenticate(authorization)
        if uid != request.uid:
            raise AuthorizationError("UID mismatch.")

        model_history = to_model_history(request.history)
        # Built outside the retry loop; conversion errors are never retried
        context = self.llm.prepare_history(seed_history(model_history, self.system_instruction))

        async def call_model() -> str:
            return await self.llm.send_message(context, request.message)

        try:
            reply_text = await with_exponential_backoff(
                call_model, max_retries=self.max_retries, base_delay=self.base_delay
            )
        except RetryExhaustedError as e:
            if isinstance(e.last_error, genai_errors.ClientError):
                raise UpstreamFatalError(str(e)) from e
            raise UpstreamTransientError(str(e)) from e

        agent_message = Message(role="agent", text=reply_text, type=MessageType.AI_RESPONSE.value)

        try:
            await self.store.put(uid, [*request.history, agent_message.model_dump()])
        except Exception as e:
            raise PersistenceError(f"Failed to save chat session: {e}") from e

        logger.info(f"Chat round trip for {uid}: {len(request.history)} messages in history")
        return agent_message

    async def load_session(self, authorization: str | None) -> ChatSession:
        """Return the caller's session, creating an empty one on first access."""
        uid = await self.authenticate(authorization)
        try:
            session = await self.store.get(uid)
            if session is None:
                session = await self.store.initialize(uid)
        except Exception as e:
            raise PersistenceError(f"Failed to load chat session: {e}") from e
        return session
