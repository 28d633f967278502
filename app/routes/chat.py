from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.routes.schemas import ChatHistoryResponse, ChatRequest, ChatResponse
from app.services.chat_service import handle_chat
from app.services.history_repo import get_chat_history
from app.services.llm.base import LLMClient
from app.services.llm.llm_factory import get_llm

router = APIRouter(prefix="/api")


@router.post("/kozani-chat", response_model=ChatResponse)
def kozani_chat(
    payload: ChatRequest | None = Body(None),
    db: Session = Depends(get_db),
    llm: LLMClient = Depends(get_llm),
):
    # no body at all is treated like an empty query
    status_code, body = handle_chat(db=db, llm=llm, req=payload or ChatRequest())
    return JSONResponse(status_code=status_code, content=body)


@router.get("/users/{user_id}/messages", response_model=ChatHistoryResponse)
def read_chat_history(user_id: str, limit: int = 50, offset: int = 0, db: Session = Depends(get_db)):
    rows = get_chat_history(db, user_id=user_id, limit=limit, offset=offset)
    return {
        "user_id": user_id,
        "messages": [
            {"role": m.role, "content": m.content, "created_at": m.created_at}
            for m in rows
        ],
    }
