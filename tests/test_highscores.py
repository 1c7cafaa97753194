from datetime import datetime, timedelta

from app.models.highscore_db.highscore_db import Highscore
from app.models.user_db.user_db import User


def test_guest_highscore_shows_up_on_leaderboard(client):
    response = client.post("/highscores", json={"score": 700, "mode": "solo", "guest_name": "Ada"})

    assert response.status_code == 201
    assert response.json() == {"message": "Highscore saved"}

    rows = client.get("/highscores").json()
    assert len(rows) == 1
    assert rows[0]["name"] == "Ada"
    assert rows[0]["score"] == 700
    assert rows[0]["mode"] == "solo"
    assert rows[0]["created_at"]


def test_user_highscore_is_named_by_email(client, db_session):
    user = User(email="ada@example.com", password_hash="x")
    db_session.add(user)
    db_session.commit()

    response = client.post("/highscores", json={"user_id": user.id, "score": 300, "mode": "duel"})

    assert response.status_code == 201
    assert client.get("/highscores").json()[0]["name"] == "ada@example.com"


def test_highscore_missing_fields(client):
    for body in (
        {"mode": "solo", "guest_name": "Ada"},
        {"score": 10, "guest_name": "Ada"},
        {"score": 10, "mode": "solo"},
        {"score": 10, "mode": "solo", "guest_name": "  "},
    ):
        response = client.post("/highscores", json=body)
        assert response.status_code == 400, body

    assert client.get("/highscores").json() == []


def test_zero_score_is_accepted(client):
    response = client.post("/highscores", json={"score": 0, "mode": "solo", "guest_name": "Ada"})

    assert response.status_code == 201


def test_same_submission_twice_is_stored_twice(client):
    body = {"score": 50, "mode": "solo", "guest_name": "Ada"}
    client.post("/highscores", json=body)
    client.post("/highscores", json=body)

    assert len(client.get("/highscores").json()) == 2


def test_leaderboard_order_and_limit(client, db_session):
    start = datetime(2025, 1, 1, 12, 0, 0)
    scores = [100, 500, 300, 500, 50, 900, 10, 20, 30, 40, 60, 70]
    for n, score in enumerate(scores):
        db_session.add(Highscore(
            guest_name=f"guest-{n}",
            score=score,
            mode="solo",
            created_at=start + timedelta(minutes=n),
        ))
    db_session.commit()

    rows = client.get("/highscores").json()

    assert len(rows) == 10
    assert [row["score"] for row in rows] == [900, 500, 500, 300, 100, 70, 60, 50, 40, 30]
    # equal scores: earlier entry first
    assert rows[1]["name"] == "guest-1"
    assert rows[2]["name"] == "guest-3"
