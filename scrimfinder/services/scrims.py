import logging
from typing import List, Optional
from sqlmodel import Session, select

from ..datetime_utils import day_bounds, utcnow
from ..exceptions import NotFoundError
from ..models.scrim import Scrim, ScrimCreate, ScrimFilters, ScrimStatus, ScrimWithHost
from ..models.team import Team, TeamRead

logger = logging.getLogger(__name__)


def _overlaps(values: List[str], wanted: List[str]) -> bool:
    return bool(set(values or []) & set(wanted))


def create_scrim(db: Session, host_team_id: str, scrim_data: ScrimCreate) -> Scrim:
    """Post a new scrim for the host team. New scrims are always open."""
    scrim = Scrim(**scrim_data.model_dump(), host_team_id=host_team_id)
    db.add(scrim)
    db.commit()
    db.refresh(scrim)

    logger.info("Scrim %s posted by team %s for %s", scrim.id, host_team_id, scrim.scheduled_at)
    return scrim


def get_scrim(db: Session, scrim_id: str) -> Optional[Scrim]:
    return db.get(Scrim, scrim_id)


def get_available_scrims(db: Session, filters: Optional[ScrimFilters] = None) -> List[ScrimWithHost]:
    """
    List open scrims with their host team, earliest first.

    Filters combine with AND:
    - day: scheduled_at within [day 00:00, next day 00:00)
    - format: exact match
    - servers: the scrim's server list shares at least one entry

    The servers filter runs after the query because the column is a JSON
    array, which SQLite cannot intersect. time, maps and region are
    accepted from clients but do not narrow the results.
    """
    filters = filters or ScrimFilters()

    statement = (
        select(Scrim, Team)
        .join(Team, Scrim.host_team_id == Team.id)
        .where(Scrim.status == ScrimStatus.OPEN.value)
    )

    if filters.day:
        start, end = day_bounds(filters.day)
        statement = statement.where(Scrim.scheduled_at >= start, Scrim.scheduled_at < end)

    if filters.format:
        statement = statement.where(Scrim.format == filters.format)

    if filters.time or filters.maps or filters.region:
        logger.debug(
            "Ignoring filters time=%r maps=%r region=%r",
            filters.time, filters.maps, filters.region
        )

    rows = db.exec(statement.order_by(Scrim.scheduled_at)).all()

    results = []
    for scrim, team in rows:
        if filters.servers and not _overlaps(scrim.servers, filters.servers):
            continue
        results.append(ScrimWithHost(**scrim.model_dump(), host_team=TeamRead.model_validate(team)))

    return results


def book_scrim(db: Session, scrim_id: str, opponent_team_id: str) -> Scrim:
    """
    Record the opponent and mark the scrim booked.

    The write does not look at the current status or the host team: a later
    booking replaces an earlier opponent (last write wins).
    """
    scrim = db.get(Scrim, scrim_id)
    if not scrim:
        raise NotFoundError(f"Scrim {scrim_id} not found")

    previous = scrim.opponent_team_id
    scrim.opponent_team_id = opponent_team_id
    scrim.status = ScrimStatus.BOOKED.value
    scrim.updated_at = utcnow()

    db.add(scrim)
    db.commit()
    db.refresh(scrim)

    if previous and previous != opponent_team_id:
        logger.info("Scrim %s rebooked by team %s, replacing team %s", scrim_id, opponent_team_id, previous)
    else:
        logger.info("Scrim %s booked by team %s", scrim_id, opponent_team_id)
    return scrim


def update_scrim_status(db: Session, scrim_id: str, status: ScrimStatus) -> Scrim:
    """Overwrite the scrim's status. Any status may follow any other."""
    target = ScrimStatus(status)

    scrim = db.get(Scrim, scrim_id)
    if not scrim:
        raise NotFoundError(f"Scrim {scrim_id} not found")

    previous = scrim.status
    scrim.status = target.value
    scrim.updated_at = utcnow()

    db.add(scrim)
    db.commit()
    db.refresh(scrim)

    logger.info("Scrim %s status %s -> %s", scrim_id, previous, target.value)
    return scrim
