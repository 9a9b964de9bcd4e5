import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from omnicode.core.config import settings
from omnicode.core.database import init_db
from omnicode.api import chat, sessions


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Configure logging based on debug setting
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s" if settings.debug
        else "%(levelname)-8s %(name)s: %(message)s",
    )

    if settings.session_backend == "sqlite":
        init_db()

    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(sessions.router, prefix="/api/sessions", tags=["sessions"])


@app.get("/api/health")
async def health():
    return {"status": "ok", "app": settings.app_name}


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
