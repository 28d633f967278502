from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "kozani-backend"
    LOG_LEVEL: str = "INFO"
    PORT: int = 8787
    CORS_ORIGINS: str = "*"  # comma separated

    DATABASE_URL: str
    DB_SSL_VERIFY: bool = True

    LLM_PROVIDER: Literal["groq", "anthropic"] = "groq"
    LLM_TEMPERATURE: float = 0.4
    LLM_MAX_TOKENS: int = 400
    LLM_MAX_HISTORY: int = 8

    GROQ_API_KEY: str | None = None
    GROQ_MODEL: str = "llama-3.1-8b-instant"
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"

    ANTHROPIC_API_KEY: str | None = None
    ANTHROPIC_MODEL: str | None = None

    @field_validator("LLM_PROVIDER", mode="before")
    @classmethod
    def _lower_provider(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
