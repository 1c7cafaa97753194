import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette import status

from app.core.database import get_db
from app.core.errors import NotFound, ValidationError
from app.models.submission_db.submission_crud import (
    approve_submission,
    create_submission,
    delete_submission,
    get_pending_submissions,
)
from app.schemas.common.message import MessageResponse
from app.schemas.submission.submission_base import ApprovalResponse, SubmissionCreate, SubmissionOut

logger = logging.getLogger("quiz.submissions")

submission_router = APIRouter(tags=["Submissions"])

REQUIRED_FIELDS = (
    "category_id",
    "question",
    "option_a",
    "option_b",
    "option_c",
    "option_d",
    "correct_option",
)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@submission_router.post("/submit-question", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def submit_question(payload: SubmissionCreate, db: Session = Depends(get_db)):
    missing = [field for field in REQUIRED_FIELDS if _is_blank(getattr(payload, field))]
    if missing:
        raise ValidationError("Please fill in all required fields: " + ", ".join(missing))

    submission = create_submission(db, payload)
    logger.info("Question submission %s queued for review", submission.id)
    return {"message": "Question submitted and awaiting review"}


@submission_router.get("/submitted-questions", response_model=List[SubmissionOut])
def list_submissions(db: Session = Depends(get_db)):
    return get_pending_submissions(db)


@submission_router.post("/approve-question/{submission_id}", response_model=ApprovalResponse)
def approve_question(submission_id: int, db: Session = Depends(get_db)):
    question = approve_submission(db, submission_id)
    if not question:
        raise NotFound("Submitted question not found")

    logger.info("Submission %s approved as question %s", submission_id, question.id)
    return {"message": "Question approved", "question_id": question.id}


@submission_router.delete("/delete-submitted/{submission_id}", response_model=MessageResponse)
def delete_submitted(submission_id: int, db: Session = Depends(get_db)):
    if delete_submission(db, submission_id):
        logger.info("Submission %s deleted", submission_id)
    return {"message": "Submitted question deleted"}
