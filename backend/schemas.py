import re
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

PASSWORD_MIN_LENGTH = 8

# reps is stored in a 32-bit INTEGER column on most backends
MAX_REPS = 2**31 - 1


def clean_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("title must not be empty")
    return value


class WorkoutCreate(BaseModel):
    title: str
    reps: int = Field(ge=0, le=MAX_REPS)
    load: float = Field(allow_inf_nan=False)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return clean_title(value)


class WorkoutUpdate(BaseModel):
    """Full or partial update; fields left out of the body are not touched."""
    title: str | None = None
    reps: int | None = Field(default=None, ge=0, le=MAX_REPS)
    load: float | None = Field(default=None, allow_inf_nan=False)

    @field_validator("title", "reps", "load")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError("%s may be omitted but not null" % info.field_name)
        if info.field_name == "title":
            return clean_title(value)
        return value


class WorkoutResponse(BaseModel):
    id: int
    title: str
    reps: int
    load: float
    user_id: int | None
    created_at: datetime | None
    updated_at: datetime | None

    class Config:
        from_attributes = True


def is_strong_password(password: str) -> bool:
    return (
        len(password) >= PASSWORD_MIN_LENGTH
        and re.search(r"[a-z]", password) is not None
        and re.search(r"[A-Z]", password) is not None
        and re.search(r"\d", password) is not None
        and re.search(r"[^A-Za-z0-9]", password) is not None
    )


class UserCreate(BaseModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def strong_password(cls, value):
        if not is_strong_password(value):
            raise ValueError(
                "password must be at least %d characters and contain upper and lower "
                "case letters, a digit and a symbol" % PASSWORD_MIN_LENGTH
            )
        return value


class UserLogin(BaseModel):
    email: str
    password: str


class UserToken(BaseModel):
    email: str
    token: str
