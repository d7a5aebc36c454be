from datetime import datetime

from scrimfinder.models import Review, Scrim


def test_home_anonymous(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Browse open scrims" in response.text


def test_home_lists_user_teams(client, user_token, make_team):
    make_team("Night Owls")
    response = client.get("/")
    assert response.status_code == 200
    assert "Night Owls" in response.text


def test_scrims_page_filters(client, session, user_token, make_team):
    team = make_team("Night Owls")
    session.add(Scrim(
        host_team_id=team["id"],
        scheduled_at=datetime(2024, 6, 1, 22, 0),
        format="Bo3",
        servers=["HK", "SG"],
        description="Looking for T2 scrims"
    ))
    session.add(Scrim(
        host_team_id=team["id"],
        scheduled_at=datetime(2024, 6, 1, 20, 0),
        format="Bo5",
        servers=["JP"],
        description="Late night practice"
    ))
    session.commit()

    response = client.get("/scrims")
    assert response.status_code == 200
    assert "Looking for T2 scrims" in response.text
    assert "Late night practice" in response.text

    response = client.get("/scrims", params={"servers": ["SG"], "date": "2024-06-01"})
    assert "Looking for T2 scrims" in response.text
    assert "Late night practice" not in response.text


def test_team_profile(client, session, user_token, make_team, make_user):
    team = make_team("Night Owls")
    reviewer = make_user("reviewer-1", first_name="Rita")
    session.add(Review(
        reviewer_id=reviewer.id,
        reviewee_team_id=team["id"],
        rating=5,
        comment="Great sportsmanship"
    ))
    session.commit()

    response = client.get(f"/teams/{team['id']}")
    assert response.status_code == 200
    assert "Night Owls" in response.text
    assert "Great sportsmanship" in response.text
    assert "Rita" in response.text


def test_team_profile_not_found(client):
    response = client.get("/teams/missing")
    assert response.status_code == 404
    assert "Team not found" in response.text
