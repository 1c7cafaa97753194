import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from main import app as quiz_app
from app.core.database import Base, SessionLocal, engine
from app.models.quiz_db.category_db import Category
from app.models.quiz_db.question_db import Question


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(quiz_app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def make_question(category_id, n, **overrides):
    fields = {
        "category_id": category_id,
        "question": f"Question {n}?",
        "option_a": "a",
        "option_b": "b",
        "option_c": "c",
        "option_d": "d",
        "correct_option": "A",
        "explanation": f"Because {n}.",
    }
    fields.update(overrides)
    return Question(**fields)


@pytest.fixture
def categories(db_session):
    db_session.add_all([Category(id=1, name="Logic"), Category(id=2, name="Programming")])
    db_session.commit()
    return db_session.query(Category).order_by(Category.id).all()
