from datetime import datetime

from scrimfinder.models import Review


def test_create_review_requires_login(client):
    response = client.post("/api/reviews", json={"reviewee_team_id": "team", "rating": 5})
    assert response.status_code == 401


def test_create_review(client, user_token, make_team, make_user, login_as):
    team = make_team()

    login_as(make_user("reviewer-1"))
    response = client.post("/api/reviews", json={
        "reviewee_team_id": team["id"],
        "rating": 4,
        "comment": "Showed up on time, good comms"
    })
    assert response.status_code == 201
    review = response.json()
    assert review["reviewer_id"] == "reviewer-1"
    assert review["is_positive"] is True
    assert review["scrim_id"] is None


def test_create_review_rating_out_of_range(client, user_token, make_team):
    team = make_team()
    response = client.post("/api/reviews", json={"reviewee_team_id": team["id"], "rating": 6})
    assert response.status_code == 422


def test_create_review_unknown_team(client, user_token):
    response = client.post("/api/reviews", json={"reviewee_team_id": "missing", "rating": 3})
    assert response.status_code == 404


def test_create_review_unknown_scrim(client, user_token, make_team):
    team = make_team()
    response = client.post("/api/reviews", json={
        "reviewee_team_id": team["id"],
        "scrim_id": "missing",
        "rating": 3
    })
    assert response.status_code == 404


def test_team_reviews_newest_first(client, session, user_token, make_team, make_user):
    team = make_team()
    reviewer = make_user("reviewer-1", first_name="Rita")

    for day, rating in ((1, 5), (3, 2), (2, 4)):
        session.add(Review(
            reviewer_id=reviewer.id,
            reviewee_team_id=team["id"],
            rating=rating,
            is_positive=rating >= 3,
            created_at=datetime(2024, 6, day, 12, 0)
        ))
    session.commit()

    client.cookies.clear()
    response = client.get(f"/api/teams/{team['id']}/reviews")
    assert response.status_code == 200
    reviews = response.json()
    assert [r["rating"] for r in reviews] == [2, 4, 5]
    assert all(r["reviewer"]["id"] == "reviewer-1" for r in reviews)
    assert reviews[0]["reviewer"]["first_name"] == "Rita"

    response = client.get(f"/api/teams/{team['id']}/reviews/summary")
    assert response.status_code == 200
    assert response.json() == {
        "team_id": team["id"],
        "total": 3,
        "positive": 2,
        "negative": 1,
        "average_rating": 3.67
    }


def test_review_summary_unknown_team(client):
    response = client.get("/api/teams/missing/reviews/summary")
    assert response.status_code == 404
