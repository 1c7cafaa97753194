from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.highscore_db.highscore_db import Highscore
from app.models.user_db.user_db import User

LEADERBOARD_SIZE = 10


def create_highscore(
    db: Session,
    score: int,
    mode: str,
    user_id: Optional[int] = None,
    guest_name: Optional[str] = None,
) -> Highscore:
    highscore = Highscore(
        user_id=user_id,
        guest_name=guest_name,
        score=score,
        mode=mode,
    )
    db.add(highscore)
    db.commit()
    db.refresh(highscore)
    return highscore


def get_top_highscores(db: Session, limit: int = LEADERBOARD_SIZE):
    """Best scores first, earlier entries win ties.

    The display name is the owner's email for registered users and the
    guest name otherwise.
    """
    return (
        db.query(
            func.coalesce(User.email, Highscore.guest_name).label("name"),
            Highscore.score,
            Highscore.mode,
            Highscore.created_at,
        )
        .outerjoin(User, Highscore.user_id == User.id)
        .order_by(Highscore.score.desc(), Highscore.created_at.asc())
        .limit(limit)
        .all()
    )
