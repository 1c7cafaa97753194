from pydantic import BaseModel, EmailStr, Field


class UserBase(BaseModel):
    email: EmailStr


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class UserOut(UserBase):
    id: int

    class Config:
        from_attributes = True


class UserRegistered(BaseModel):
    user: UserOut
