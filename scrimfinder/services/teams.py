import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
from sqlmodel import Session, select, func

from ..datetime_utils import utcnow
from ..exceptions import NotFoundError
from ..models.review import Review
from ..models.team import Team, TeamCreate, TeamMember, TeamStatsUpdate

logger = logging.getLogger(__name__)

RATING_PLACES = Decimal("0.01")


def create_team(db: Session, owner_id: str, team_data: TeamCreate) -> Team:
    """
    Create a team owned by `owner_id` and add the owner as a member.

    Both rows go out in a single commit, so a failure leaves neither behind.
    """
    team = Team(**team_data.model_dump(), owner_id=owner_id)
    membership = TeamMember(team_id=team.id, user_id=owner_id, role="owner")

    try:
        db.add(team)
        db.add(membership)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(team)
    logger.info("Team %s (%s) created by %s", team.id, team.name, owner_id)
    return team


def get_team(db: Session, team_id: str) -> Optional[Team]:
    return db.get(Team, team_id)


def get_user_teams(db: Session, user_id: str) -> List[Team]:
    """All teams the user belongs to, in any role."""
    statement = (
        select(Team)
        .join(TeamMember, TeamMember.team_id == Team.id)
        .where(TeamMember.user_id == user_id)
    )
    return list(db.exec(statement).all())


def is_team_member(db: Session, user_id: str, team_id: str) -> bool:
    membership = db.exec(
        select(TeamMember).where(
            TeamMember.team_id == team_id,
            TeamMember.user_id == user_id
        )
    ).first()
    return membership is not None


def update_team_stats(db: Session, team_id: str, stats: TeamStatsUpdate) -> Team:
    """Merge the fields set on `stats` into the team and bump updated_at."""
    team = db.get(Team, team_id)
    if not team:
        raise NotFoundError(f"Team {team_id} not found")

    for field, value in stats.model_dump(exclude_unset=True).items():
        setattr(team, field, value)
    team.updated_at = utcnow()

    db.add(team)
    db.commit()
    db.refresh(team)
    return team


def recompute_team_rating(db: Session, team_id: str) -> Team:
    """
    Set the team's rating to the mean of its review ratings.

    Ratings are rounded half-up to two places; a team without reviews
    goes back to 0.00. Nothing calls this automatically.
    """
    if not db.get(Team, team_id):
        raise NotFoundError(f"Team {team_id} not found")

    average = db.exec(
        select(func.avg(Review.rating)).where(Review.reviewee_team_id == team_id)
    ).first()

    if average is None:
        rating = Decimal("0.00")
    else:
        rating = Decimal(str(average)).quantize(RATING_PLACES, rounding=ROUND_HALF_UP)

    logger.info("Recomputed rating for team %s: %s", team_id, rating)
    return update_team_stats(db, team_id, TeamStatsUpdate(rating=rating))
