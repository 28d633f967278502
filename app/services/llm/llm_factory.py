from functools import lru_cache

from app.core.config import settings
from app.services.llm.anthropic_client import AnthropicClient
from app.services.llm.base import LLMClient
from app.services.llm.groq_client import GroqClient

PROVIDERS = {
    "groq": GroqClient,
    "anthropic": AnthropicClient,
}


@lru_cache(maxsize=1)
def get_llm() -> LLMClient:
    """Process-wide generation client, built on first use."""
    # LLM_PROVIDER is validated when settings load
    return PROVIDERS[settings.LLM_PROVIDER]()
