from pydantic import BaseModel, EmailStr


# EmailStr normalizes the same way as registration, so lookups match
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    token: str
