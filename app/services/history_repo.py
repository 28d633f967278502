import logging
import warnings

from sqlalchemy.orm import Session

from app.core.errors import PersistenceWarning
from app.db.models import Message

logger = logging.getLogger(__name__)

ROLES = ("user", "assistant")


def append_message(db: Session, user_id: str, role: str, content: str) -> bool:
    """
    Best-effort insert of one turn. Returns False (and rolls back) on failure
    instead of raising, so a reply that is already computed still goes out.
    """
    try:
        db.add(Message(user_id=str(user_id), role=role, content=content))
        db.commit()
        return True
    except Exception as exc:
        db.rollback()
        logger.warning("Could not save %s message for user=%s: %s", role, user_id, exc)
        warnings.warn(f"history append failed for user={user_id}", PersistenceWarning, stacklevel=2)
        return False


def get_recent_history(db: Session, user_id: str, limit: int) -> list[dict]:
    """
    Last `limit` turns for a user, oldest -> newest:
      [{"role":"user","content":"..."}, {"role":"assistant","content":"..."}]
    """
    rows = (
        db.query(Message)
        .filter(Message.user_id == str(user_id))
        .order_by(Message.created_at.desc(), Message.id.desc())
        .limit(int(limit))
        .all()
    )
    rows = list(reversed(rows))

    history: list[dict] = []
    for m in rows:
        if m.role not in ROLES:
            continue
        content = m.content if isinstance(m.content, str) else str(m.content)
        history.append({"role": m.role, "content": content})
    return history


def get_chat_history(db: Session, user_id: str, limit: int = 50, offset: int = 0):
    """
    Returns messages for a user ordered oldest -> newest.
    """
    q = (
        db.query(Message)
        .filter(Message.user_id == str(user_id))
        .order_by(Message.created_at.asc(), Message.id.asc())
        .offset(offset)
        .limit(limit)
    )
    return q.all()
