from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _default_session_file() -> str:
    return str(Path.home() / ".cadastro" / "session.json")


@dataclass(frozen=True)
class Settings:
    firebase_api_key: str = os.getenv("FIREBASE_API_KEY", "")
    firebase_project_id: str = os.getenv("FIREBASE_PROJECT_ID", "")
    firebase_auth_emulator_host: str = os.getenv("FIREBASE_AUTH_EMULATOR_HOST", "")

    clients_collection: str = os.getenv("CLIENTS_COLLECTION", "clients")
    session_file: str = os.getenv("SESSION_FILE", _default_session_file())
    auth_timeout_seconds: float = float(os.getenv("AUTH_TIMEOUT_SECONDS", "15"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = _flag(os.getenv("LOG_JSON", "0"))

    web_mode: bool = _flag(os.getenv("CADASTRO_WEB", "0"))
    port: int = int(os.getenv("PORT", "8550"))

    cors_allowed_origins: tuple[str, ...] = _split_csv(
        os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:8550,http://127.0.0.1:8550")
    )


settings = Settings()
