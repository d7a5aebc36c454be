import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..config import DEV_LOGIN_ENABLED, SESSION_COOKIE_NAME, SESSION_EXPIRE_DAYS
from ..database import get_session
from ..dependencies import require_user
from ..models.user import User, UserRead, UserUpsert
from ..services.auth import create_session, delete_session
from ..services.users import upsert_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.get("/auth/user", response_model=UserRead)
async def get_auth_user(current_user: User = Depends(require_user)):
    """Return the signed-in user."""
    return current_user


@router.post("/login", response_model=UserRead)
async def login(
    claims: UserUpsert,
    db: Session = Depends(get_session)
):
    """
    Start a session from identity claims posted by the client.

    Only available with DEV_LOGIN_ENABLED; in production the identity
    provider's callback creates sessions through services.auth.create_session.
    """
    if not DEV_LOGIN_ENABLED:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    try:
        user = upsert_user(db, claims)
        user_session = create_session(db, claims)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error logging in user %s", claims.id)
        raise HTTPException(status_code=500, detail="Failed to log in")

    response = JSONResponse(content=UserRead.model_validate(user).model_dump(mode="json"))
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=user_session.sid,
        httponly=True,
        max_age=SESSION_EXPIRE_DAYS * 24 * 60 * 60,
        samesite="lax"
    )
    return response


@router.post("/logout")
async def logout(
    request: Request,
    db: Session = Depends(get_session)
):
    """End the current session."""
    session_token: Optional[str] = request.cookies.get(SESSION_COOKIE_NAME)
    if session_token:
        delete_session(db, session_token)

    response = JSONResponse(content={"message": "Logged out"})
    response.delete_cookie(key=SESSION_COOKIE_NAME)
    return response
