from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4
from sqlmodel import SQLModel, Field, UniqueConstraint

from ..datetime_utils import utcnow


class TeamBase(SQLModel):
    name: str = Field(index=True, min_length=1, max_length=100)
    logo_url: Optional[str] = Field(default=None, max_length=500)
    region: str = Field(index=True, min_length=1, max_length=50)
    tier: Optional[str] = Field(default=None, max_length=50)


class Team(TeamBase, table=True):
    """A team that hosts and books scrims."""
    __tablename__ = "teams"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)

    # Denormalized stats, only changed through update_team_stats
    rating: Decimal = Field(default=Decimal("0.00"), max_digits=3, decimal_places=2)
    games_played: int = Field(default=0)
    response_rate: int = Field(default=100)  # percent
    cancellation_rate: int = Field(default=0)  # percent

    owner_id: Optional[str] = Field(default=None, foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class TeamCreate(TeamBase):
    pass


class TeamRead(TeamBase):
    id: str
    rating: Decimal
    games_played: int
    response_rate: int
    cancellation_rate: int
    owner_id: Optional[str]
    created_at: datetime
    updated_at: datetime


class TeamStatsUpdate(SQLModel):
    """Partial stats update; unset fields are left alone."""
    rating: Optional[Decimal] = Field(default=None, ge=0, max_digits=3, decimal_places=2)
    games_played: Optional[int] = Field(default=None, ge=0)
    response_rate: Optional[int] = Field(default=None, ge=0, le=100)
    cancellation_rate: Optional[int] = Field(default=None, ge=0, le=100)


class TeamMember(SQLModel, table=True):
    __tablename__ = "team_members"
    __table_args__ = (UniqueConstraint("team_id", "user_id", name="unique_team_user"),)

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    team_id: str = Field(foreign_key="teams.id", index=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    role: str = Field(default="member")  # owner, member
    joined_at: datetime = Field(default_factory=utcnow)
