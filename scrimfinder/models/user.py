from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field

from ..datetime_utils import utcnow


class UserBase(SQLModel):
    email: Optional[str] = Field(default=None, unique=True, index=True, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    profile_image_url: Optional[str] = Field(default=None, max_length=500)


class User(UserBase, table=True):
    """Local copy of an identity provider account."""
    __tablename__ = "users"

    # Subject id handed out by the identity provider
    id: str = Field(primary_key=True, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class UserUpsert(UserBase):
    """Identity claims used to create or refresh a user."""
    id: str = Field(min_length=1, max_length=255)


class UserRead(UserBase):
    id: str
    created_at: datetime
    updated_at: datetime
