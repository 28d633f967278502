import logging
import time

from openai import OpenAI

from app.core.config import settings
from app.core.errors import DependencyError
from app.services.llm.base import LLMClient

logger = logging.getLogger(__name__)


class GroqClient(LLMClient):
    """Groq through its OpenAI-compatible chat completions endpoint."""

    provider = "groq"

    def __init__(self):
        self.model = settings.GROQ_MODEL
        self._client = None
        if settings.GROQ_API_KEY:
            self._client = OpenAI(api_key=settings.GROQ_API_KEY, base_url=settings.GROQ_BASE_URL)

    def generate(self, messages: list[dict]) -> str | None:
        if self._client is None:
            raise DependencyError("GROQ_API_KEY not set in environment")

        t0 = time.time()
        completion = self._client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=settings.LLM_TEMPERATURE,
            max_tokens=settings.LLM_MAX_TOKENS,
        )
        latency_s = time.time() - t0

        usage = getattr(completion, "usage", None)
        logger.info(
            "Groq latency=%.2fs prompt_tokens=%s completion_tokens=%s",
            latency_s,
            getattr(usage, "prompt_tokens", None),
            getattr(usage, "completion_tokens", None),
        )

        if not completion.choices:
            return None
        return completion.choices[0].message.content
