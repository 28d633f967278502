from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Dict, Optional

ChatMsg = Dict[str, str]  # {"role": "...", "content": "..."}

class LLMClient(ABC):
    provider: str = "none"
    model: str = "none"

    @abstractmethod
    def generate(self, messages: List[ChatMsg]) -> Optional[str]:
        """
        messages example:
          [{"role":"system","content":"..."}, {"role":"user","content":"hi"}]
        Returns the first completion's text, or None when the provider sent
        no content. Provider errors propagate to the caller.
        """
        raise NotImplementedError
