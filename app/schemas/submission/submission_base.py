from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from app.services.answer_options import AnswerOption


# Every field is optional here; the route decides which ones are required
# so that a missing field is answered like any other invalid submission.
class SubmissionCreate(BaseModel):
    user_email: Optional[str] = None
    category_id: Optional[int] = None
    question: Optional[str] = None
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    option_d: Optional[str] = None
    correct_option: Optional[AnswerOption] = None
    explanation: Optional[str] = None


class SubmissionOut(BaseModel):
    id: int
    user_email: Optional[str] = None
    category_id: int
    question: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_option: AnswerOption
    explanation: Optional[str] = None
    reviewed: bool
    submitted_at: datetime

    class Config:
        from_attributes = True


class ApprovalResponse(BaseModel):
    message: str
    question_id: int
