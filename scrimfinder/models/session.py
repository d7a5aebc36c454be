from datetime import datetime
from typing import Any, Dict
from sqlalchemy import JSON
from sqlmodel import SQLModel, Field


class Session(SQLModel, table=True):
    __tablename__ = "sessions"

    sid: str = Field(primary_key=True)
    # Identity claims captured at login
    sess: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    expire: datetime = Field(index=True)
