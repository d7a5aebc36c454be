from typing import Optional
from sqlmodel import Session

from ..datetime_utils import utcnow
from ..models.user import User, UserUpsert


def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get a user by identity id."""
    return db.get(User, user_id)


def upsert_user(db: Session, user_data: UserUpsert) -> User:
    """Insert a user, or overwrite its profile fields if the id already exists."""
    user = db.get(User, user_data.id)

    if user is None:
        user = User(**user_data.model_dump())
    else:
        for field, value in user_data.model_dump(exclude={"id"}).items():
            setattr(user, field, value)
        user.updated_at = utcnow()

    db.add(user)
    db.commit()
    db.refresh(user)
    return user
