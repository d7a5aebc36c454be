from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Request, Depends, Query
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from ..config import TEMPLATES_DIR
from ..database import get_session
from ..dependencies import get_current_user
from ..models.scrim import ScrimFilters
from ..models.user import User
from ..services.reviews import get_team_review_summary, get_team_reviews
from ..services.scrims import get_available_scrims
from ..services.teams import get_team, get_user_teams

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

SERVERS = ["HK", "SG", "JP", "SYD", "MB"]
FORMATS = ["1 Game", "Bo3", "Bo5"]


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    current_user: Optional[User] = Depends(get_current_user),
    db: Session = Depends(get_session)
):
    user_teams = get_user_teams(db, current_user.id) if current_user else []

    return templates.TemplateResponse(request, "index.html", {
        "current_user": current_user,
        "user_teams": user_teams
    })


@router.get("/scrims", response_class=HTMLResponse)
async def scrims_page(
    request: Request,
    day: Optional[date] = Query(None, alias="date"),
    format: Optional[str] = None,
    servers: List[str] = Query(default=[]),
    current_user: Optional[User] = Depends(get_current_user),
    db: Session = Depends(get_session)
):
    """Scrim listing with the filter form."""
    filters = ScrimFilters(day=day, format=format or None, servers=servers or None)
    scrims = get_available_scrims(db, filters)

    return templates.TemplateResponse(request, "scrims.html", {
        "current_user": current_user,
        "scrims": scrims,
        "filters": filters,
        "all_servers": SERVERS,
        "all_formats": FORMATS
    })


@router.get("/teams/{team_id}", response_class=HTMLResponse)
async def team_profile(
    team_id: str,
    request: Request,
    current_user: Optional[User] = Depends(get_current_user),
    db: Session = Depends(get_session)
):
    team = get_team(db, team_id)
    if not team:
        return templates.TemplateResponse(request, "not_found.html", {
            "current_user": current_user,
            "message": "Team not found"
        }, status_code=404)

    return templates.TemplateResponse(request, "team.html", {
        "current_user": current_user,
        "team": team,
        "summary": get_team_review_summary(db, team_id),
        "reviews": get_team_reviews(db, team_id)
    })
