from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.errors import KozaniError
from app.db.session import get_db
from app.routes.schemas import LoginRequest, LoginResponse
from app.services.auth_service import login_or_register

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest | None = Body(None), db: Session = Depends(get_db)):
    payload = payload or LoginRequest()
    try:
        result = login_or_register(db, phone=payload.phone, password=payload.password, name=payload.name)
    except KozaniError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))

    user = result.user
    body = LoginResponse(user_id=user.id, name=user.name, phone=user.phone, is_new=result.is_new)
    return JSONResponse(status_code=201 if result.is_new else 200, content=body.model_dump())
