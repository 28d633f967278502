from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime

class Snippet(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: str = ""

class ChatRequest(BaseModel):
    query: str | None = None
    snippets: list[Snippet] = Field(default_factory=list, description="Grounding passages, used in order")
    language: str | None = "en"
    client: str | None = None
    user_id: str | None = Field(None, description="users.id returned by /login")

    @field_validator("user_id", mode="before")
    @classmethod
    def _coerce_user_id(cls, v):
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("language", mode="before")
    @classmethod
    def _default_language(cls, v):
        return "en" if v is None or v == "" else v

    @field_validator("client", mode="before")
    @classmethod
    def _coerce_client(cls, v):
        # opaque client id, echoed back in meta
        return None if v is None else str(v)

    @field_validator("snippets", mode="before")
    @classmethod
    def _null_snippets(cls, v):
        return v or []

class Safety(BaseModel):
    ok: bool
    flags: list[str] = Field(default_factory=list)

class ChatMeta(BaseModel):
    model: str
    provider: str | None = None
    grounded: bool | None = None
    language: str | None = None
    client: str | None = None

class ChatResponse(BaseModel):
    answer: str
    safety: Safety
    meta: ChatMeta


class LoginRequest(BaseModel):
    # optional here so a missing field is a 400 from the handler, not a 422
    phone: str | None = None
    password: str | None = None
    name: str | None = None

class LoginResponse(BaseModel):
    user_id: str
    name: str | None = None
    phone: str
    is_new: bool


class MessageOut(BaseModel):
    role: str
    content: str
    created_at: datetime

class ChatHistoryResponse(BaseModel):
    user_id: str
    messages: list[MessageOut]
