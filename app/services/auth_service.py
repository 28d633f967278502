from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AuthError, DependencyError, ValidationError
from app.db.models import User
from app.services.user_repo import create_user, find_by_phone, verify_password

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    user: User
    is_new: bool


def login_or_register(db: Session, phone: str | None, password: str | None, name: str | None = None) -> LoginResult:
    """
    Unknown phone -> register (is_new=True). Known phone -> check password.
    The 401 message is the same whether or not the phone exists.
    """
    phone = (phone or "").strip()
    if not phone or not password:
        raise ValidationError("phone and password are required")

    try:
        user = find_by_phone(db, phone)
        if user is None:
            user = create_user(db, phone=phone, password=password, name=(name or "").strip() or None)
            logger.info("Registered user=%s", user.id)
            return LoginResult(user=user, is_new=True)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Login lookup/registration failed")
        raise DependencyError("user store unavailable") from exc

    if not verify_password(password, user.password_hash):
        logger.info("Rejected login for user=%s", user.id)
        raise AuthError("invalid phone or password")

    return LoginResult(user=user, is_new=False)
