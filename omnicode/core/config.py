from pathlib import Path

from pydantic_settings import BaseSettings

SYSTEM_INSTRUCTION = """You are the OmniCode Agent, an expert programming assistant.
Your primary function is to analyze the user's provided code block and explain it in detail, focusing on how it works, its purpose, and best practices.
Keep your explanations concise, professional, and markdown-formatted.
If a user asks a general question, answer briefly and guide them to provide a code block."""


class Settings(BaseSettings):
    app_name: str = "OmniCode Chat Gateway"
    debug: bool = False

    # LLM
    llm_provider: str = "gemini"  # gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    system_instruction: str = SYSTEM_INSTRUCTION

    # Retry policy for the model call
    retry_max_attempts: int = 3
    retry_base_delay: float = 1.0  # seconds, doubled per attempt

    # Identity
    identity_provider: str = "firebase"  # firebase
    firebase_credentials_path: str = ""
    firebase_project_id: str = ""

    # Session store
    session_backend: str = "firestore"  # firestore | sqlite
    session_collection: str = "chatSessions"
    db_path: Path = Path(__file__).resolve().parent.parent.parent / "omnicode.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["https://omnicode-f652d.web.app", "http://localhost:5173"]

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent.parent / ".env"),
        "env_prefix": "OMNICODE_",
    }


settings = Settings()
