# backend/tripgenius/api/routes_auth.py

import secrets

from fastapi import APIRouter, Depends, HTTPException

from tripgenius.api.deps import get_current_user_id, store_dep
from tripgenius.core.logger import get_logger
from tripgenius.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from tripgenius.db.base import DuplicateEmailError, TripStore
from tripgenius.models.user_models import (
    AuthOut,
    LoginIn,
    MessageOut,
    SignupIn,
    UserOut,
    VerifyEmailIn,
)

router = APIRouter(prefix="/auth", tags=["auth"])
log = get_logger("auth")


# --------------------------
# UTILS
# --------------------------
def _public_user(user: dict) -> UserOut:
    return UserOut(
        id=user["id"],
        email=user["email"],
        name=user["name"],
        created_at=user["created_at"],
    )


def _issue_token(user: dict) -> str:
    return create_access_token(
        subject=user["id"],
        claims={"email": user["email"], "name": user["name"]},
    )


# --------------------------
# SIGNUP
# --------------------------
@router.post("/signup", response_model=AuthOut, status_code=201)
def signup(data: SignupIn, store: TripStore = Depends(store_dep)):
    if store.get_user_by_email(data.email):
        raise HTTPException(400, "Email already registered")

    verification_token = f"verify_{secrets.token_urlsafe(16)}"
    try:
        user = store.create_user(
            email=data.email,
            name=data.name.strip(),
            password_hash=get_password_hash(data.password),
            verification_token=verification_token,
        )
    except DuplicateEmailError:
        raise HTTPException(400, "Email already registered")

    # no mail transport; the link is only logged
    log.info(f"[Email Verification] Send email to {user['email']} with token: {verification_token}")

    return AuthOut(user=_public_user(user), token=_issue_token(user))


# --------------------------
# LOGIN
# --------------------------
@router.post("/login", response_model=AuthOut)
def login(data: LoginIn, store: TripStore = Depends(store_dep)):
    user = store.get_user_by_email(data.email)
    if not user or not verify_password(data.password, user["password_hash"]):
        log.info(f"Failed login for {data.email}")
        raise HTTPException(401, "Invalid email or password")

    return AuthOut(user=_public_user(user), token=_issue_token(user))


# --------------------------
# VERIFY EMAIL
# --------------------------
@router.post("/verify-email", response_model=MessageOut)
def verify_email(data: VerifyEmailIn, store: TripStore = Depends(store_dep)):
    user = store.get_user_by_verification_token(data.token)
    if not user:
        raise HTTPException(400, "Invalid verification token")

    store.mark_email_verified(user["id"])
    return {"message": "Email verified successfully"}


# --------------------------
# ME
# --------------------------
@router.get("/me", response_model=UserOut)
def me(user_id: str = Depends(get_current_user_id), store: TripStore = Depends(store_dep)):
    user = store.get_user_by_id(user_id)
    if not user:
        raise HTTPException(401, "Invalid token")
    return _public_user(user)
