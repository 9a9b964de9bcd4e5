"""Shared test fixtures for gateway tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from omnicode.api.deps import get_chat_gateway
from omnicode.services.gateway import ChatGateway
from omnicode.services.identity.base import BaseIdentityVerifier, InvalidTokenError
from omnicode.services.llm.base import BaseLLMProvider
from omnicode.services.sessions.sqlite import SqliteSessionStore

# In-memory SQLite with StaticPool so all connections (including threads) share one DB
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

VALID_TOKENS = {"token-u1": "u1", "token-u2": "u2"}


class FakeLLMProvider(BaseLLMProvider):
    """Replays scripted outcomes; an Exception entry is raised instead of returned.

    The last outcome repeats once the script runs out.
    """

    def __init__(self, outcomes=None):
        self.outcomes = list(outcomes or ["Hello!"])
        self.calls: list[tuple[list[dict], str]] = []

    async def send_message(self, history, message):
        self.calls.append((history, message))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeIdentityVerifier(BaseIdentityVerifier):
    async def verify(self, token):
        try:
            return VALID_TOKENS[token]
        except KeyError:
            raise InvalidTokenError("Firebase ID token has invalid signature")


@pytest.fixture(autouse=True)
def setup_test_db():
    """Create all tables before each test, drop after."""
    import omnicode.models.session  # noqa: F401 - register models
    SQLModel.metadata.create_all(test_engine)
    yield
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def fake_llm():
    return FakeLLMProvider()


@pytest.fixture
def store():
    return SqliteSessionStore(test_engine)


@pytest.fixture
def gateway(fake_llm, store):
    return ChatGateway(
        llm=fake_llm,
        identity=FakeIdentityVerifier(),
        store=store,
        max_retries=3,
        base_delay=0,
        system_instruction="You are a test persona.",
    )


@pytest.fixture
def client(gateway):
    """FastAPI TestClient with the gateway's collaborators faked."""
    from omnicode.main import app

    app.dependency_overrides[get_chat_gateway] = lambda: gateway

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
