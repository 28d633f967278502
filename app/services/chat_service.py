from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import ValidationError
from app.routes.schemas import ChatRequest
from app.services.history_repo import append_message, get_recent_history
from app.services.llm.base import LLMClient
from app.services.prompt_builder import build_grounding, build_system_prompt, build_turns


logger = logging.getLogger(__name__)

LLM_MAX_HISTORY = settings.LLM_MAX_HISTORY

EMPTY_QUERY_REPLY = "I didn’t receive anything to respond to."
FALLBACK_REPLY = "I’m sorry, I’m struggling to respond right now."
BACKEND_ERROR_REPLY = "I’m sorry, something went wrong while thinking. Please try again a bit later."


def failure_body(answer: str, flag: str) -> dict:
    return {
        "answer": answer,
        "safety": {"ok": False, "flags": [flag]},
        "meta": {"model": "none"},
    }


def validate_query(query: str | None) -> str:
    q = (query or "").strip()
    if not q:
        raise ValidationError("empty query")
    return q


def generate_reply(db: Session, llm: LLMClient, req: ChatRequest, query: str) -> dict:
    # 1) grounding + system prompt
    grounding = build_grounding(req.snippets)
    system_prompt = build_system_prompt(grounding)

    # 2) short-term memory (oldest first)
    history: list[dict] = []
    if req.user_id:
        history = get_recent_history(db, req.user_id, LLM_MAX_HISTORY)

    # 3) generation
    turns = build_turns(system_prompt, history, query)
    answer = llm.generate(turns) or FALLBACK_REPLY

    logger.info(
        "provider=%s model=%s history=%d grounded=%s",
        llm.provider,
        llm.model,
        len(history),
        bool(grounding),
    )

    # 4) persist both turns, best effort
    if req.user_id:
        append_message(db, req.user_id, "user", query)
        append_message(db, req.user_id, "assistant", answer)

    return {
        "answer": answer,
        "safety": {"ok": True, "flags": []},
        "meta": {
            "model": llm.model,
            "provider": llm.provider,
            "grounded": bool(grounding),
            "language": req.language,
            "client": req.client,
        },
    }


# --------- MAIN HANDLER ---------

def handle_chat(db: Session, llm: LLMClient, req: ChatRequest) -> tuple[int, dict]:
    """
    Returns (http_status, payload). Never raises: validation failures become
    400 and anything else after validation becomes a 500 apology.
    """
    try:
        query = validate_query(req.query)
    except ValidationError:
        return 400, failure_body(EMPTY_QUERY_REPLY, "empty_query")

    try:
        return 200, generate_reply(db, llm, req, query)
    except Exception:
        logger.exception("Kozani chat failed")
        return 500, failure_body(BACKEND_ERROR_REPLY, "backend_error")
