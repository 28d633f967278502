import logging
import time

from anthropic import Anthropic

from app.core.config import settings
from app.core.errors import DependencyError
from app.services.llm.base import LLMClient

logger = logging.getLogger(__name__)


class AnthropicClient(LLMClient):
    provider = "anthropic"

    def __init__(self):
        self.model = settings.ANTHROPIC_MODEL or "claude-sonnet-4-20250514"
        self._client = None
        if settings.ANTHROPIC_API_KEY:
            self._client = Anthropic(api_key=settings.ANTHROPIC_API_KEY)

    def generate(self, messages: list[dict]) -> str | None:
        """
        Claude takes the system prompt separately (not as a role in messages).
        """
        if self._client is None:
            raise DependencyError("ANTHROPIC_API_KEY not set in environment")

        system = "\n\n".join(m["content"] for m in messages if m["role"] == "system")
        turns = [m for m in messages if m["role"] != "system"]

        t0 = time.time()
        resp = self._client.messages.create(
            model=self.model,
            max_tokens=settings.LLM_MAX_TOKENS,
            temperature=settings.LLM_TEMPERATURE,
            system=system,
            messages=turns,
        )
        latency_s = time.time() - t0

        usage = getattr(resp, "usage", None)
        logger.info(
            "Claude latency=%.2fs input_tokens=%s output_tokens=%s",
            latency_s,
            getattr(usage, "input_tokens", None),
            getattr(usage, "output_tokens", None),
        )

        text = "".join(block.text for block in resp.content if block.type == "text").strip()
        return text or None
