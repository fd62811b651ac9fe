from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class Credentials(BaseModel):
    """Body of /api/register, /api/login and POST /users"""
    username: Optional[str] = None
    password: Optional[str] = None

    def is_complete(self) -> bool:
        # Empty strings count as missing
        return bool(self.username) and bool(self.password)


class UserUpdate(BaseModel):
    username: Optional[str] = None
    # Omitted password clears the stored one (see account_service.update_user)
    password: Optional[str] = None


class LoginUser(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class AuthResult(BaseModel):
    success: bool
    message: str


class LoginResult(AuthResult):
    user: LoginUser


class UserResponse(BaseModel):
    # Password is never part of a response, not even hashed
    id: int
    username: str
    created_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class UserUpdated(BaseModel):
    id: int
    username: str
