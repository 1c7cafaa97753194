import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette import status

from app.core.database import get_db
from app.core.errors import ValidationError
from app.models.highscore_db.highscore_crud import create_highscore, get_top_highscores
from app.schemas.common.message import MessageResponse
from app.schemas.highscore.highscore_base import HighscoreCreate, HighscoreOut

logger = logging.getLogger("quiz.highscores")

highscore_router = APIRouter(prefix="/highscores", tags=["Highscores"])


@highscore_router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def submit_highscore(payload: HighscoreCreate, db: Session = Depends(get_db)):
    guest_name = (payload.guest_name or "").strip() or None
    mode = (payload.mode or "").strip() or None

    if payload.score is None or not mode or (payload.user_id is None and not guest_name):
        raise ValidationError("Missing fields: score, mode and either user_id or guest_name")

    highscore = create_highscore(
        db,
        score=payload.score,
        mode=mode,
        user_id=payload.user_id,
        guest_name=guest_name,
    )
    logger.info("Stored highscore %s (%s points, mode %s)", highscore.id, highscore.score, highscore.mode)
    return {"message": "Highscore saved"}


@highscore_router.get("", response_model=List[HighscoreOut])
def list_highscores(db: Session = Depends(get_db)):
    return [dict(row._mapping) for row in get_top_highscores(db)]
