from .user import User, UserUpsert, UserRead
from .session import Session
from .team import Team, TeamCreate, TeamRead, TeamStatsUpdate, TeamMember
from .scrim import Scrim, ScrimStatus, ScrimCreate, ScrimRead, ScrimWithHost, ScrimFilters
from .review import Review, ReviewCreate, ReviewRead, ReviewWithReviewer, ReviewSummary

__all__ = [
    "User",
    "UserUpsert",
    "UserRead",
    "Session",
    "Team",
    "TeamCreate",
    "TeamRead",
    "TeamStatsUpdate",
    "TeamMember",
    "Scrim",
    "ScrimStatus",
    "ScrimCreate",
    "ScrimRead",
    "ScrimWithHost",
    "ScrimFilters",
    "Review",
    "ReviewCreate",
    "ReviewRead",
    "ReviewWithReviewer",
    "ReviewSummary",
]
