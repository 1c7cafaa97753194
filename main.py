import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings
from app.core.errors import StoreError
from app.core.log_config import setup_logging
from app.routes.auth.auth_routers import auth_router
from app.routes.quiz.quiz_routers import quiz_router
from app.routes.highscore.highscore_routers import highscore_router
from app.routes.submission.submission_routers import submission_router

setup_logging()
logger = logging.getLogger("quiz")

app = FastAPI(title="Quiz API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Bodies are never logged, they carry passwords
class LogRequestMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response


app.add_middleware(LogRequestMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    logger.warning(f"Invalid request to {request.url.path}: {fields}")
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Missing or invalid fields",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store error on {request.method} {request.url.path}", exc_info=exc)
    error = StoreError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


app.include_router(auth_router)
app.include_router(quiz_router)
app.include_router(highscore_router)
app.include_router(submission_router)


@app.get("/", response_class=PlainTextResponse)
async def read_root():
    return "Quiz backend is online"


if __name__ == "__main__":
    logger.info(f"Quiz backend listening on port {settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
