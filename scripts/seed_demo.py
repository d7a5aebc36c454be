"""Seed demo users, teams, scrims and reviews for local development."""
import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import Session, select
from scrimfinder.database import engine, create_db_and_tables
from scrimfinder.datetime_utils import utcnow
from scrimfinder.models import ReviewCreate, ScrimCreate, Team, TeamCreate, TeamStatsUpdate, UserUpsert
from scrimfinder.services.reviews import create_review
from scrimfinder.services.scrims import create_scrim
from scrimfinder.services.teams import create_team, recompute_team_rating, update_team_stats
from scrimfinder.services.users import upsert_user

USERS = [
    {"id": "demo-kai", "email": "kai@example.com", "first_name": "Kai", "last_name": "Tan"},
    {"id": "demo-mei", "email": "mei@example.com", "first_name": "Mei", "last_name": "Lin"},
    {"id": "demo-sam", "email": "sam@example.com", "first_name": "Sam", "last_name": "Reid"},
]

# owner id, team fields, games played
TEAMS = [
    ("demo-kai", {"name": "Nightfall Esports", "region": "APAC", "tier": "Diamond"}, 48),
    ("demo-mei", {"name": "Lotus Gaming", "region": "APAC", "tier": "Platinum"}, 31),
    ("demo-sam", {"name": "Southern Cross", "region": "OCE", "tier": "Gold"}, 12),
]

# team index, hours from now, format, servers, maps
SCRIMS = [
    (0, 2, "Bo3", ["HK", "SG"], ["Ascent", "Bind", "Haven"]),
    (0, 26, "1 Game", ["HK"], ["Lotus"]),
    (1, 5, "Bo5", ["SG", "JP"], []),
    (2, 8, "Bo3", ["SYD", "MB"], ["Split"]),
]

# reviewer index, team index, rating, comment
REVIEWS = [
    (1, 0, 5, "Professional, on time, great comms"),
    (2, 0, 4, "Good practice partners"),
    (0, 1, 3, "Started 15 minutes late"),
]


def seed_demo(db: Session) -> dict:
    """Insert demo rows; returns how many of each were created."""
    users = [upsert_user(db, UserUpsert(**data)) for data in USERS]

    teams = []
    for owner_id, team_data, games_played in TEAMS:
        team = create_team(db, owner_id, TeamCreate(**team_data))
        teams.append(update_team_stats(db, team.id, TeamStatsUpdate(games_played=games_played)))

    start = utcnow().replace(minute=0, second=0, microsecond=0)
    for team_index, hours, format, servers, maps in SCRIMS:
        create_scrim(db, teams[team_index].id, ScrimCreate(
            scheduled_at=start + timedelta(hours=hours),
            format=format,
            servers=servers,
            maps=maps
        ))

    for reviewer_index, team_index, rating, comment in REVIEWS:
        create_review(db, users[reviewer_index].id, ReviewCreate(
            reviewee_team_id=teams[team_index].id,
            rating=rating,
            comment=comment,
            is_positive=rating >= 4
        ))

    for team in teams:
        recompute_team_rating(db, team.id)

    return {"users": len(USERS), "teams": len(TEAMS), "scrims": len(SCRIMS), "reviews": len(REVIEWS)}


if __name__ == "__main__":
    create_db_and_tables()

    with Session(engine) as session:
        # Check if demo data already exists
        if session.exec(select(Team)).first():
            print("Database already has teams, skipping demo seed.")
            sys.exit(0)

        counts = seed_demo(session)
        print(f"Seeded {counts['users']} users, {counts['teams']} teams, "
              f"{counts['scrims']} scrims and {counts['reviews']} reviews.")
