from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, Integer, Text, Boolean, DateTime
from app.core.database import Base


class SubmittedQuestion(Base):
    __tablename__ = "submitted_questions"

    id = Column(Integer, primary_key=True, index=True)
    user_email = Column(String, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    question = Column(Text, nullable=False)
    option_a = Column(Text, nullable=False)
    option_b = Column(Text, nullable=False)
    option_c = Column(Text, nullable=False)
    option_d = Column(Text, nullable=False)
    correct_option = Column(String(1), nullable=False)
    explanation = Column(Text, nullable=True)
    reviewed = Column(Boolean, default=False, nullable=False)
    submitted_at = Column(DateTime, default=datetime.utcnow, nullable=False)
