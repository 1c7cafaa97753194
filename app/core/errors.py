from fastapi import HTTPException


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Missing or invalid fields"):
        super().__init__(status_code=400, detail=detail)


class Unauthorized(HTTPException):
    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(
            status_code=401,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFound(HTTPException):
    """Missing entity. Most routes answer 404, login answers 400."""

    def __init__(self, detail: str = "Not found", status_code: int = 404):
        super().__init__(status_code=status_code, detail=detail)


class Conflict(HTTPException):
    def __init__(self, detail: str = "Already exists"):
        super().__init__(status_code=400, detail=detail)


class StoreError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=500, detail=detail)
