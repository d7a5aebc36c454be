import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..exceptions import NotFoundError
from ..models.review import ReviewCreate, ReviewRead
from ..models.user import User
from ..services.reviews import create_review

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
async def post_review(
    review_data: ReviewCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Review a team after a scrim."""
    try:
        return create_review(db, current_user.id, review_data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating review")
        raise HTTPException(status_code=500, detail="Failed to create review")
