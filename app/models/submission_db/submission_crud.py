from typing import List
from sqlalchemy.orm import Session

from app.models.quiz_db.question_db import Question
from app.models.submission_db.submitted_question_db import SubmittedQuestion
from app.schemas.submission.submission_base import SubmissionCreate

# fields copied verbatim from a submission into the published question
QUESTION_FIELDS = (
    "category_id",
    "question",
    "option_a",
    "option_b",
    "option_c",
    "option_d",
    "correct_option",
    "explanation",
)


def create_submission(db: Session, submission: SubmissionCreate) -> SubmittedQuestion:
    db_submission = SubmittedQuestion(
        user_email=submission.user_email or None,
        category_id=submission.category_id,
        question=submission.question,
        option_a=submission.option_a,
        option_b=submission.option_b,
        option_c=submission.option_c,
        option_d=submission.option_d,
        correct_option=submission.correct_option.value,
        explanation=submission.explanation or None,
        reviewed=False,
    )
    db.add(db_submission)
    db.commit()
    db.refresh(db_submission)
    return db_submission


def get_pending_submissions(db: Session) -> List[SubmittedQuestion]:
    return (
        db.query(SubmittedQuestion)
        .filter(SubmittedQuestion.reviewed.is_(False))
        .order_by(SubmittedQuestion.submitted_at.desc(), SubmittedQuestion.id.desc())
        .all()
    )


def pending_submission_query(db: Session, submission_id: int, for_update: bool = False):
    query = db.query(SubmittedQuestion).filter(
        SubmittedQuestion.id == submission_id,
        SubmittedQuestion.reviewed.is_(False),
    )
    if for_update:
        query = query.with_for_update()
    return query


def get_pending_submission(db: Session, submission_id: int, for_update: bool = False):
    return pending_submission_query(db, submission_id, for_update=for_update).first()


def approve_submission(db: Session, submission_id: int):
    """Publish a pending submission as a question.

    The new question and the reviewed flag are committed together, so a
    failure leaves the submission pending and no question behind.
    The pending row stays locked until the commit, so concurrent approvals
    of the same id publish it only once.
    Returns None when there is no pending submission with that id.
    """
    submission = get_pending_submission(db, submission_id, for_update=True)
    if not submission:
        return None

    question = Question(**{field: getattr(submission, field) for field in QUESTION_FIELDS})
    db.add(question)
    submission.reviewed = True

    db.commit()
    db.refresh(question)
    return question


def delete_submission(db: Session, submission_id: int) -> int:
    deleted = db.query(SubmittedQuestion).filter(SubmittedQuestion.id == submission_id).delete()
    db.commit()
    return deleted
