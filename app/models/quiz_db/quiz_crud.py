from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.quiz_db.category_db import Category
from app.models.quiz_db.question_db import Question

QUESTIONS_PER_ROUND = 10


def get_random_questions(db: Session, category_id: int, limit: int = QUESTIONS_PER_ROUND) -> List[Question]:
    return (
        db.query(Question)
        .filter(Question.category_id == category_id)
        .order_by(func.random())
        .limit(limit)
        .all()
    )


def get_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.id.asc()).all()


def get_question_by_id(db: Session, question_id: int):
    return db.query(Question).filter(Question.id == question_id).first()
