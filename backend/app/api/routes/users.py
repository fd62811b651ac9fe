from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.exceptions import HashError, StoreError, ValidationError
from app.schemas.user import Credentials, UserResponse, UserUpdate, UserUpdated
from app.services.account_service import account_service

router = APIRouter(prefix="/users", tags=["users"])

# Constants
DATABASE_ERROR_MESSAGE = "Database error"
HASH_ERROR_MESSAGE = "Password hashing error"


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """List all users without their password hashes"""
    try:
        return account_service.list_users(db)
    except StoreError as exc:
        raise exc.with_message(DATABASE_ERROR_MESSAGE) from exc


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: Optional[Credentials] = None, db: Session = Depends(get_db)):
    """Add a new user (same contract as /api/register)"""
    payload = payload or Credentials()
    if not payload.is_complete():
        raise ValidationError("Username and password are required.")

    try:
        return account_service.create_account(db, payload.username, payload.password)
    except StoreError as exc:
        raise exc.with_message(DATABASE_ERROR_MESSAGE) from exc
    except HashError as exc:
        raise exc.with_message(HASH_ERROR_MESSAGE) from exc


@router.put("/{user_id}", response_model=UserUpdated)
def update_user(
    user_id: int,
    payload: Optional[UserUpdate] = None,
    db: Session = Depends(get_db)
):
    """
    Update username and password of a user.

    Omitting the password clears it; the user can no longer log in
    until a new password is set.
    """
    payload = payload or UserUpdate()
    if not payload.username:
        raise ValidationError("Username is required.")

    try:
        account_service.update_user(db, user_id, payload.username, payload.password)
    except StoreError as exc:
        raise exc.with_message(DATABASE_ERROR_MESSAGE) from exc
    except HashError as exc:
        raise exc.with_message(HASH_ERROR_MESSAGE) from exc

    return {"id": user_id, "username": payload.username}


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user"""
    try:
        account_service.delete_user(db, user_id)
    except StoreError as exc:
        raise exc.with_message(DATABASE_ERROR_MESSAGE) from exc

    return {"message": "User deleted successfully"}
