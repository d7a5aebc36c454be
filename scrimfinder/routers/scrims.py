import logging
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..exceptions import NotFoundError
from ..models.scrim import ScrimCreate, ScrimFilters, ScrimRead, ScrimStatus, ScrimWithHost
from ..models.user import User
from ..services import scrims as scrim_service
from ..services.teams import is_team_member

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/scrims", tags=["scrims"])


class ScrimCreateRequest(ScrimCreate):
    """Scrim fields plus the team posting it."""
    team_id: str


class BookingRequest(BaseModel):
    team_id: str


class StatusUpdateRequest(BaseModel):
    status: ScrimStatus


def split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Turn "HK,SG" into ["HK", "SG"]; empty input means no filter."""
    if not value:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None


def ensure_member(db: Session, user: User, team_id: str, action: str):
    if not is_team_member(db, user.id, team_id):
        logger.warning("User %s is not a member of team %s", user.id, team_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action} for this team"
        )


@router.post("", response_model=ScrimRead, status_code=status.HTTP_201_CREATED)
async def create_scrim(
    payload: ScrimCreateRequest,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Post an open scrim on behalf of one of the user's teams."""
    ensure_member(db, current_user, payload.team_id, "create scrims")

    scrim_data = ScrimCreate(**payload.model_dump(exclude={"team_id"}))
    try:
        return scrim_service.create_scrim(db, payload.team_id, scrim_data)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating scrim")
        raise HTTPException(status_code=500, detail="Failed to create scrim")


@router.get("", response_model=List[ScrimWithHost])
async def list_scrims(
    day: Optional[date] = Query(None, alias="date"),
    time: Optional[str] = None,
    format: Optional[str] = None,
    maps: Optional[str] = None,
    servers: Optional[str] = None,
    region: Optional[str] = None,
    db: Session = Depends(get_session)
):
    """Open scrims with their host team. `maps` and `servers` are comma-separated."""
    filters = ScrimFilters(
        day=day,
        time=time,
        format=format,
        maps=split_csv(maps),
        servers=split_csv(servers),
        region=region
    )
    try:
        return scrim_service.get_available_scrims(db, filters)
    except SQLAlchemyError:
        logger.exception("Error fetching scrims")
        raise HTTPException(status_code=500, detail="Failed to fetch scrims")


@router.get("/{scrim_id}", response_model=ScrimRead)
async def get_scrim(
    scrim_id: str,
    db: Session = Depends(get_session)
):
    scrim = scrim_service.get_scrim(db, scrim_id)
    if not scrim:
        raise HTTPException(status_code=404, detail="Scrim not found")
    return scrim


@router.post("/{scrim_id}/book")
async def book_scrim(
    scrim_id: str,
    payload: BookingRequest,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Book a scrim for one of the user's teams. A later booking replaces the opponent."""
    ensure_member(db, current_user, payload.team_id, "book scrims")

    try:
        scrim_service.book_scrim(db, scrim_id, payload.team_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Scrim not found")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error booking scrim %s", scrim_id)
        raise HTTPException(status_code=500, detail="Failed to book scrim")

    return {"message": "Scrim booked successfully"}


@router.patch("/{scrim_id}/status", response_model=ScrimRead)
async def update_scrim_status(
    scrim_id: str,
    payload: StatusUpdateRequest,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Set a scrim's status. Only members of the host team may do this."""
    scrim = scrim_service.get_scrim(db, scrim_id)
    if not scrim:
        raise HTTPException(status_code=404, detail="Scrim not found")

    ensure_member(db, current_user, scrim.host_team_id, "update scrims")

    try:
        return scrim_service.update_scrim_status(db, scrim_id, payload.status)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Scrim not found")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating status of scrim %s", scrim_id)
        raise HTTPException(status_code=500, detail="Failed to update scrim")
