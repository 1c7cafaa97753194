from sqlalchemy.orm import Session
from app.core.database import Base, SessionLocal, engine
from app.models.quiz_db.category_db import Category
from app.models.quiz_db.question_db import Question
# registered on Base.metadata for create_all
from app.models.user_db.user_db import User  # noqa: F401
from app.models.highscore_db.highscore_db import Highscore  # noqa: F401
from app.models.submission_db.submitted_question_db import SubmittedQuestion  # noqa: F401


category_data = [
    {"id": 1, "name": "Propositional Logic"},
    {"id": 2, "name": "Requirements Engineering"},
    {"id": 3, "name": "Programming"},
]

question_data = [
    {
        "category_id": 1,
        "question": "Which formula is equivalent to ¬(A ∧ B)?",
        "option_a": "¬A ∧ ¬B",
        "option_b": "¬A ∨ ¬B",
        "option_c": "A ∨ B",
        "option_d": "A → B",
        "correct_option": "B",
        "explanation": "De Morgan: the negation of a conjunction is the disjunction of the negations.",
    },
    {
        "category_id": 1,
        "question": "When is the implication A → B false?",
        "option_a": "A false, B false",
        "option_b": "A false, B true",
        "option_c": "A true, B false",
        "option_d": "A true, B true",
        "correct_option": "C",
        "explanation": "An implication only fails when a true premise leads to a false conclusion.",
    },
    {
        "category_id": 2,
        "question": "Which of these is a non-functional requirement?",
        "option_a": "The user can reset the password",
        "option_b": "The page loads within two seconds",
        "option_c": "The admin can delete accounts",
        "option_d": "The system exports invoices as PDF",
        "correct_option": "B",
        "explanation": "Response time describes a quality of the system, not a function.",
    },
    {
        "category_id": 3,
        "question": "What does HTTP status 404 mean?",
        "option_a": "Unauthorized",
        "option_b": "Server error",
        "option_c": "Created",
        "option_d": "Not found",
        "correct_option": "D",
        "explanation": None,
    },
]


def seed_quiz_questions():
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()

    for data in category_data:
        exists = db.query(Category).filter(Category.id == data["id"]).first()
        if not exists:
            db.add(Category(**data))
    db.flush()

    for data in question_data:
        exists = db.query(Question).filter(Question.question == data["question"]).first()
        if not exists:
            db.add(Question(**data))

    db.commit()
    db.close()
    print("✅ Categories and quiz questions seeded!")


if __name__ == "__main__":
    seed_quiz_questions()
