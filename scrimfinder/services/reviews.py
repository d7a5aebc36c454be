import logging
from typing import List
from sqlalchemy import case
from sqlmodel import Session, select, func

from ..exceptions import NotFoundError
from ..models.review import Review, ReviewCreate, ReviewSummary, ReviewWithReviewer
from ..models.scrim import Scrim
from ..models.team import Team
from ..models.user import User, UserRead

logger = logging.getLogger(__name__)


def create_review(db: Session, reviewer_id: str, review_data: ReviewCreate) -> Review:
    """Record a review of a team. The same reviewer may review a team more than once."""
    if not db.get(Team, review_data.reviewee_team_id):
        raise NotFoundError(f"Team {review_data.reviewee_team_id} not found")

    if review_data.scrim_id and not db.get(Scrim, review_data.scrim_id):
        raise NotFoundError(f"Scrim {review_data.scrim_id} not found")

    review = Review(**review_data.model_dump(), reviewer_id=reviewer_id)
    db.add(review)
    db.commit()
    db.refresh(review)

    logger.info("Review %s left for team %s by %s", review.id, review.reviewee_team_id, reviewer_id)
    return review


def get_team_reviews(db: Session, team_id: str) -> List[ReviewWithReviewer]:
    """Reviews of a team with the reviewer attached, newest first."""
    statement = (
        select(Review, User)
        .join(User, Review.reviewer_id == User.id)
        .where(Review.reviewee_team_id == team_id)
        .order_by(Review.created_at.desc())
    )
    return [
        ReviewWithReviewer(**review.model_dump(), reviewer=UserRead.model_validate(reviewer))
        for review, reviewer in db.exec(statement).all()
    ]


def get_team_review_summary(db: Session, team_id: str) -> ReviewSummary:
    total, positive, average = db.exec(
        select(
            func.count(Review.id),
            func.sum(case((Review.is_positive == True, 1), else_=0)),  # noqa: E712
            func.avg(Review.rating)
        ).where(Review.reviewee_team_id == team_id)
    ).one()

    return ReviewSummary(
        team_id=team_id,
        total=total,
        positive=positive or 0,
        negative=total - (positive or 0),
        average_rating=round(float(average), 2) if average is not None else None
    )
