from datetime import datetime
from typing import Optional
from uuid import uuid4
from sqlmodel import SQLModel, Field

from ..datetime_utils import utcnow
from .user import UserRead


class ReviewBase(SQLModel):
    rating: int = Field(ge=1, le=5)  # stars
    comment: Optional[str] = Field(default=None, max_length=2000)
    is_positive: bool = Field(default=True)


class Review(ReviewBase, table=True):
    __tablename__ = "reviews"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    reviewer_id: str = Field(foreign_key="users.id", index=True)
    reviewee_team_id: str = Field(foreign_key="teams.id", index=True)
    scrim_id: Optional[str] = Field(default=None, foreign_key="scrims.id", index=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)


class ReviewCreate(ReviewBase):
    reviewee_team_id: str
    scrim_id: Optional[str] = None


class ReviewRead(ReviewBase):
    id: str
    reviewer_id: str
    reviewee_team_id: str
    scrim_id: Optional[str]
    created_at: datetime


class ReviewWithReviewer(ReviewRead):
    reviewer: UserRead


class ReviewSummary(SQLModel):
    team_id: str
    total: int
    positive: int
    negative: int
    average_rating: Optional[float]
