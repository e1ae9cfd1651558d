# backend/tripgenius/models/user_models.py

from pydantic import BaseModel, EmailStr, Field

from tripgenius.models.base import CamelModel


# -------------------------
# Signup / login input
# -------------------------
class SignupIn(BaseModel):
    email: EmailStr
    name: str = Field(min_length=2)
    password: str = Field(min_length=8)


class LoginIn(BaseModel):
    email: EmailStr
    password: str


class VerifyEmailIn(BaseModel):
    token: str = ""


# -------------------------
# Public user projection
# -------------------------
class UserOut(CamelModel):
    id: str
    email: EmailStr
    name: str
    created_at: str


class AuthOut(BaseModel):
    user: UserOut
    token: str


class MessageOut(BaseModel):
    message: str
