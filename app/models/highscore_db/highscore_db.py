from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, Integer, DateTime
from app.core.database import Base


class Highscore(Base):
    __tablename__ = "highscores"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    guest_name = Column(String, nullable=True)
    score = Column(Integer, nullable=False)
    mode = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
