from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4
from pydantic import field_validator, model_validator
from sqlalchemy import JSON
from sqlmodel import SQLModel, Field

from ..datetime_utils import to_naive_utc, utcnow
from .team import TeamRead


class ScrimStatus(str, Enum):
    OPEN = "open"
    BOOKED = "booked"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ScrimBase(SQLModel):
    scheduled_at: datetime = Field(index=True)
    end_time: Optional[datetime] = Field(default=None)
    format: str = Field(index=True, max_length=50)  # "1 Game", "Bo3", "Bo5"
    maps: List[str] = Field(default_factory=list, sa_type=JSON)
    servers: List[str] = Field(sa_type=JSON)  # ["HK", "SG", "JP", "SYD", "MB"]
    game_mode: str = Field(default="Competitive", max_length=50)
    min_rank: Optional[str] = Field(default=None, max_length=50)
    max_rank: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = Field(default=None)


class Scrim(ScrimBase, table=True):
    """A practice match slot posted by a host team."""
    __tablename__ = "scrims"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    host_team_id: str = Field(foreign_key="teams.id", index=True)
    # Set when the scrim is booked; stays set through completed/cancelled
    opponent_team_id: Optional[str] = Field(default=None, foreign_key="teams.id", index=True)
    status: str = Field(default=ScrimStatus.OPEN.value, index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class ScrimCreate(ScrimBase):
    @field_validator("scheduled_at", "end_time")
    @classmethod
    def normalize_timestamp(cls, value):
        return to_naive_utc(value)

    @field_validator("servers")
    @classmethod
    def servers_not_empty(cls, value: List[str]) -> List[str]:
        servers = [server.strip() for server in value if server and server.strip()]
        if not servers:
            raise ValueError("At least one server is required")
        return servers

    @field_validator("format")
    @classmethod
    def format_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Format is required")
        return value.strip()

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_time is not None and self.end_time <= self.scheduled_at:
            raise ValueError("end_time must be after scheduled_at")
        return self


class ScrimRead(ScrimBase):
    id: str
    host_team_id: str
    opponent_team_id: Optional[str]
    status: str
    created_at: datetime
    updated_at: datetime


class ScrimWithHost(ScrimRead):
    host_team: TeamRead


class ScrimFilters(SQLModel):
    """Listing filters; all optional. time, maps and region are accepted but not applied."""
    day: Optional[date] = None
    time: Optional[str] = None
    format: Optional[str] = None
    maps: Optional[List[str]] = None
    servers: Optional[List[str]] = None
    region: Optional[str] = None
