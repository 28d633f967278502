# app/main.py

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.log_config import setup_logging

from app.db.session import get_db, init_db, ping

# registers the models on Base.metadata so init_db can create the tables
from app.db import models  # noqa: F401

from app.routes.auth import router as auth_router
from app.routes.chat import router as chat_router
from app.services.chat_service import EMPTY_QUERY_REPLY, failure_body

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(auth_router)
app.include_router(chat_router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed chat bodies still get the apology envelope
    if request.url.path == "/api/kozani-chat":
        logger.info("Rejected chat body: %s", exc.errors())
        return JSONResponse(status_code=400, content=failure_body(EMPTY_QUERY_REPLY, "empty_query"))
    return await request_validation_exception_handler(request, exc)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@app.on_event("startup")
def on_startup():
    # create_all only; schema changes are out of scope
    init_db()
    logger.info("%s ready on port %s", settings.APP_NAME, settings.PORT)


@app.get("/api/health")
def health():
    return {"status": "ok", "service": settings.APP_NAME, "time": _now_iso()}


@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    try:
        db_time = ping(db)
    except SQLAlchemyError:
        logger.exception("DB ping failed")
        return JSONResponse(status_code=500, content={"ok": False})
    return {"ok": True, "time": str(db_time)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
