"""Pydantic request/response schemas for Users API."""
from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator

from ...db.tables import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH


class UserCreateIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        return v


class UserOut(BaseModel):
    id: int
    name: str
    email: EmailStr
