import logging
import secrets
from datetime import timedelta
from typing import Optional
from sqlmodel import Session

from ..config import SESSION_EXPIRE_DAYS
from ..datetime_utils import utcnow
from ..models.session import Session as UserSession
from ..models.user import UserUpsert

logger = logging.getLogger(__name__)


def generate_session_token() -> str:
    """Generate a secure random session token."""
    return secrets.token_urlsafe(32)


def create_session(db: Session, claims: UserUpsert) -> UserSession:
    """Store the identity provider's claims under a new session token."""
    user_session = UserSession(
        sid=generate_session_token(),
        sess=claims.model_dump(),
        expire=utcnow() + timedelta(days=SESSION_EXPIRE_DAYS)
    )
    db.add(user_session)
    db.commit()
    db.refresh(user_session)

    logger.info("Started session for user %s", claims.id)
    return user_session


def get_session_claims(db: Session, session_token: str) -> Optional[UserUpsert]:
    """Get the identity claims for a session token if the session is still valid."""
    user_session = db.get(UserSession, session_token)

    if not user_session:
        return None

    # Check if session has expired
    if user_session.expire < utcnow():
        db.delete(user_session)
        db.commit()
        return None

    return UserUpsert.model_validate(user_session.sess)


def delete_session(db: Session, session_token: str) -> bool:
    """Delete a session (logout)."""
    user_session = db.get(UserSession, session_token)

    if user_session:
        db.delete(user_session)
        db.commit()
        return True

    return False
