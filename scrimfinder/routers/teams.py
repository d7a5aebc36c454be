import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.review import ReviewSummary, ReviewWithReviewer
from ..models.team import TeamCreate, TeamRead
from ..models.user import User
from ..services import reviews as review_service
from ..services import teams as team_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.post("", response_model=TeamRead, status_code=status.HTTP_201_CREATED)
async def create_team(
    team_data: TeamCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Create a team owned by the current user."""
    try:
        return team_service.create_team(db, current_user.id, team_data)
    except SQLAlchemyError:
        logger.exception("Error creating team")
        raise HTTPException(status_code=500, detail="Failed to create team")


# Declared before /{team_id} so "user" is not taken as an id
@router.get("/user", response_model=List[TeamRead])
async def get_user_teams(
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Teams the current user belongs to."""
    try:
        return team_service.get_user_teams(db, current_user.id)
    except SQLAlchemyError:
        logger.exception("Error fetching teams for user %s", current_user.id)
        raise HTTPException(status_code=500, detail="Failed to fetch teams")


@router.get("/{team_id}", response_model=TeamRead)
async def get_team(
    team_id: str,
    db: Session = Depends(get_session)
):
    try:
        team = team_service.get_team(db, team_id)
    except SQLAlchemyError:
        logger.exception("Error fetching team %s", team_id)
        raise HTTPException(status_code=500, detail="Failed to fetch team")

    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.post("/{team_id}/rating/recompute", response_model=TeamRead)
async def recompute_rating(
    team_id: str,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Recalculate the team's rating from its reviews."""
    if not team_service.get_team(db, team_id):
        raise HTTPException(status_code=404, detail="Team not found")

    if not team_service.is_team_member(db, current_user.id, team_id):
        logger.warning("User %s tried to recompute rating of team %s", current_user.id, team_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to manage this team"
        )

    try:
        return team_service.recompute_team_rating(db, team_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error recomputing rating for team %s", team_id)
        raise HTTPException(status_code=500, detail="Failed to recompute rating")


@router.get("/{team_id}/reviews", response_model=List[ReviewWithReviewer])
async def get_team_reviews(
    team_id: str,
    db: Session = Depends(get_session)
):
    """Reviews of a team, newest first."""
    try:
        return review_service.get_team_reviews(db, team_id)
    except SQLAlchemyError:
        logger.exception("Error fetching reviews for team %s", team_id)
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")


@router.get("/{team_id}/reviews/summary", response_model=ReviewSummary)
async def get_team_review_summary(
    team_id: str,
    db: Session = Depends(get_session)
):
    if not team_service.get_team(db, team_id):
        raise HTTPException(status_code=404, detail="Team not found")

    try:
        return review_service.get_team_review_summary(db, team_id)
    except SQLAlchemyError:
        logger.exception("Error summarizing reviews for team %s", team_id)
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")
