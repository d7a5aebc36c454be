import logging
from typing import Optional
from fastapi import Request, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from .config import SESSION_COOKIE_NAME
from .database import get_session
from .models.user import User
from .services.auth import get_session_claims
from .services.users import upsert_user

logger = logging.getLogger(__name__)


async def get_current_user(
    request: Request,
    db: Session = Depends(get_session)
) -> Optional[User]:
    """Get the current user from the session cookie, refreshing the stored profile."""
    session_token = request.cookies.get(SESSION_COOKIE_NAME)
    if not session_token:
        return None

    claims = get_session_claims(db, session_token)
    if not claims:
        return None

    # Keep the local user row in sync with the identity provider
    try:
        return upsert_user(db, claims)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error syncing user %s from session claims", claims.id)
        return None


async def require_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """Require a logged-in user."""
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return current_user
