import logging
from datetime import datetime

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.db.base import Base

logger = logging.getLogger(__name__)


def _engine_kwargs(database_url: str, ssl_verify: bool) -> dict:
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        # local dev / tests
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs = {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}
    if url.get_backend_name() == "postgresql" and "sslmode" not in url.query:
        kwargs["connect_args"] = {"sslmode": "verify-full" if ssl_verify else "require"}
    return kwargs


engine = create_engine(
    settings.DATABASE_URL,
    **_engine_kwargs(settings.DATABASE_URL, settings.DB_SSL_VERIFY),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency for FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create all database tables (no migrations)."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created (if they did not already exist)")


def ping(db: Session) -> datetime | str:
    return db.execute(text("SELECT CURRENT_TIMESTAMP")).scalar_one()
