import logging

from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from app.core.config import settings
from app.core.exceptions import HashError, ValidationError

logger = logging.getLogger(__name__)

# CryptContext handles password hashing using bcrypt
# bcrypt generates a random salt per hash and embeds it (with the cost) in the output
# bcrypt__default_rounds fixes the work factor for every new hash
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=settings.BCRYPT_ROUNDS,
)

INVALID_PASSWORD_MESSAGE = "Password contains invalid characters."


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt"""
    try:
        return pwd_context.hash(password)
    except PasswordValueError as exc:
        # bcrypt refuses NUL bytes and passlib caps the length; that is bad input, not a server fault
        logger.info(f"Password rejected by hasher: {exc}")
        raise ValidationError(INVALID_PASSWORD_MESSAGE) from exc
    except (ValueError, TypeError) as exc:
        logger.error(f"Error hashing password: {exc}")
        raise HashError() from exc


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a stored hash.

    This is the only way a plaintext is compared with a stored value.
    A stored value that is not a recognisable hash (empty, cleared, corrupt)
    raises HashError instead of returning False.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError:
        # Such a password could never have been hashed, so it matches nothing
        return False
    except (ValueError, TypeError) as exc:
        logger.error(f"Error comparing passwords: {exc}")
        raise HashError() from exc
