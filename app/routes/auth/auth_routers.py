import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette import status

from app.core.database import get_db
from app.core.errors import Conflict, NotFound, Unauthorized
from app.core.security import (
    verify_password,
    create_access_token,
    get_current_user
)
from app.models.user_db.user_db import User
from app.models.user_db.user_db_crud import create_user, get_user_by_email
from app.schemas.login.login_base import LoginRequest, TokenResponse
from app.schemas.users.user_base import UserCreate, UserOut, UserRegistered

logger = logging.getLogger("quiz.auth")

auth_router = APIRouter(tags=["Auth"])


@auth_router.post("/register", response_model=UserRegistered, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    if get_user_by_email(db, payload.email):
        logger.info("Registration rejected, email already registered: %s", payload.email)
        raise Conflict("Email already registered")

    try:
        user = create_user(db, payload.email, payload.password)
    except IntegrityError:
        # lost a race against a concurrent registration of the same email
        db.rollback()
        logger.info("Registration rejected by unique constraint: %s", payload.email)
        raise Conflict("Email already registered")

    logger.info("Registered user %s", user.id)
    return {"user": user}


@auth_router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = get_user_by_email(db, payload.email)
    if not user:
        raise NotFound("User not found", status_code=status.HTTP_400_BAD_REQUEST)

    if not verify_password(payload.password, user.password_hash):
        logger.info("Wrong password for user %s", user.id)
        raise Unauthorized("Wrong password")

    token = create_access_token({"id": user.id, "email": user.email})
    return {"token": token}


@auth_router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
