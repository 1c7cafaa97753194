from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from app.core.database import get_db
from app.core.errors import NotFound, ValidationError
from app.models.quiz_db.quiz_crud import get_categories, get_question_by_id, get_random_questions
from app.schemas.quiz.quiz_base import CategoryOut, ExplanationOut, QuestionOut

quiz_router = APIRouter(tags=["Quiz"])


@quiz_router.get("/questions", response_model=List[QuestionOut])
def list_questions(
    category: Optional[int] = Query(None, description="Category id"),
    db: Session = Depends(get_db)
):
    if category is None:
        raise ValidationError("Category id missing. Use ?category=ID")
    return get_random_questions(db, category)


@quiz_router.get("/categories", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return get_categories(db)


@quiz_router.get("/explanation/{question_id}", response_model=ExplanationOut)
def get_explanation(question_id: int, db: Session = Depends(get_db)):
    question = get_question_by_id(db, question_id)
    if not question:
        raise NotFound("Question not found")
    return {"question_id": question.id, "explanation": question.explanation}
