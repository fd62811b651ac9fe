import logging
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.exceptions import AppError, RESULT_ENVELOPE, ValidationError
from app.schemas.user import AuthResult, Credentials, LoginResult, LoginUser
from app.services.account_service import account_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

MISSING_CREDENTIALS_MESSAGE = "Username and password are required."


def _require_credentials(payload: Optional[Credentials]) -> Credentials:
    # A missing body is treated like an empty one
    payload = payload or Credentials()
    if not payload.is_complete():
        raise ValidationError(MISSING_CREDENTIALS_MESSAGE, envelope=RESULT_ENVELOPE)
    return payload


@router.post("/register", response_model=AuthResult, status_code=status.HTTP_201_CREATED)
def register(payload: Optional[Credentials] = None, db: Session = Depends(get_db)):
    """Register a new user"""
    credentials = _require_credentials(payload)
    try:
        account_service.create_account(db, credentials.username, credentials.password)
    except AppError as exc:
        raise exc.with_message(envelope=RESULT_ENVELOPE) from exc

    return {"success": True, "message": "User registered successfully."}


@router.post("/login", response_model=LoginResult)
def login(payload: Optional[Credentials] = None, db: Session = Depends(get_db)):
    """Check a username/password pair and return the matching user"""
    credentials = _require_credentials(payload)
    try:
        user = account_service.authenticate(db, credentials.username, credentials.password)
    except AppError as exc:
        raise exc.with_message(envelope=RESULT_ENVELOPE) from exc

    logger.info(f"User {user.id} logged in")
    return {
        "success": True,
        "message": "Login successful.",
        "user": LoginUser.model_validate(user),
    }
