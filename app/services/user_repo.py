from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from app.db.models import User


def find_by_phone(db: Session, phone: str) -> User | None:
    return db.query(User).filter(User.phone == phone).first()


def create_user(db: Session, phone: str, password: str, name: str | None = None) -> User:
    # werkzeug default: salted scrypt/pbkdf2, never the plaintext
    user = User(phone=phone, password_hash=generate_password_hash(password), name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def verify_password(plaintext: str, stored_hash: str) -> bool:
    if not stored_hash:
        return False
    return check_password_hash(stored_hash, plaintext)
