from typing import Optional
from pydantic import BaseModel

from app.services.answer_options import AnswerOption


class CategoryOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class QuestionBase(BaseModel):
    category_id: int
    question: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_option: AnswerOption
    explanation: Optional[str] = None


class QuestionOut(QuestionBase):
    id: int

    class Config:
        from_attributes = True


class ExplanationOut(BaseModel):
    question_id: int
    explanation: Optional[str] = None
