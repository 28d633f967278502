"""Prompt assembly for Kozani replies.

Builds the turn list handed to the generation service:

    [system instructions + grounding] + [prior turns, oldest first] + [new user turn]

No I/O happens here. History is used as given: no summarisation, no dedup,
no token-budget trimming beyond the cap applied by the caller.
"""

from __future__ import annotations

from typing import Iterable

SYSTEM_PROMPT = """You are Kozani, an empathetic perinatal companion for expectant and new mothers,
especially in under-resourced settings.

Your goals:
- Listen with warmth and respect.
- Reflect their feelings back gently.
- Offer clear, simple, practical guidance.
- Encourage seeking professional help when needed.
- Never judge, shame, or blame.

Safety rules:
- DO NOT diagnose or prescribe medication.
- DO NOT give exact doses or treatment plans.
- DO NOT contradict local healthcare professionals.
- If there is any sign of danger (severe pain, heavy bleeding, trouble breathing, thoughts of self-harm),
  clearly advise the user to seek urgent medical help or visit a clinic/hospital as soon as possible.

Keep responses:
- Short (4-7 sentences).
- In plain, simple language.
- Emotionally validating.

Use this trusted information as background context when relevant (but do not quote it word-for-word):
"""


def _snippet_text(snippet) -> str:
    # Snippet models from the request, or plain {"text": ...} dicts
    if isinstance(snippet, dict):
        return str(snippet.get("text") or "")
    return snippet.text or ""


def build_grounding(snippets: Iterable | None) -> str:
    """Join snippet texts in the order supplied, separated by a blank line."""
    return "\n\n".join(_snippet_text(s) for s in (snippets or []))


def build_system_prompt(grounding: str) -> str:
    return f"{SYSTEM_PROMPT}\n{grounding}".strip()


def build_turns(system_prompt: str, history: list[dict], query: str) -> list[dict]:
    turns = [{"role": "system", "content": system_prompt}]
    turns.extend({"role": h["role"], "content": h["content"]} for h in history)
    turns.append({"role": "user", "content": query})
    return turns
