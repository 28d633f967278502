import os

# must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LLM_PROVIDER"] = "groq"
os.environ.pop("GROQ_API_KEY", None)
os.environ.pop("ANTHROPIC_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.session import SessionLocal, engine, get_db
from app.main import app
from app.services.llm.base import LLMClient
from app.services.llm.llm_factory import get_llm


class FakeLLM(LLMClient):
    provider = "fake"
    model = "fake-model"

    def __init__(self, reply="You are not alone. Please rest and drink water."):
        self.reply = reply
        self.calls: list[list[dict]] = []

    def generate(self, messages):
        self.calls.append(messages)
        if isinstance(self.reply, Exception):
            raise self.reply
        if callable(self.reply):
            return self.reply(messages)
        return self.reply


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def client(db_session, fake_llm):
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_llm] = lambda: fake_llm
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
