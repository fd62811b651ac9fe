import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import AuthError, ConflictError, NotFoundError, StoreError
from app.core.security import get_password_hash, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


class AccountService:
    """
    Credentialed accounts: creation, login check and user CRUD.

    Registration and POST /users share create_account, so both enforce
    the same required fields, duplicate check and hashing.
    Every store call is wrapped so SQLAlchemy errors leave as StoreError
    after the session is rolled back.
    """

    @staticmethod
    def find_by_username(db: Session, username: str) -> Optional[User]:
        try:
            return db.query(User).filter(User.username == username).first()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error looking up user: {str(e)}")
            raise StoreError() from e

    @staticmethod
    def create_account(db: Session, username: str, password: str) -> User:
        """
        Insert a new user with a hashed password.

        Raises ConflictError if the username is taken, HashError if hashing
        fails and StoreError for lookup or insert failures.
        """
        if AccountService.find_by_username(db, username) is not None:
            logger.info(f"Registration refused, username already exists: {username}")
            raise ConflictError()

        db_user = User(username=username, password=get_password_hash(password))
        try:
            db.add(db_user)
            db.commit()
            # Refresh to load generated id and created_at
            db.refresh(db_user)
        except IntegrityError as e:
            # Two requests passed the existence check at the same time
            db.rollback()
            logger.info(f"Registration raced on username {username}: {str(e)}")
            raise ConflictError() from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error inserting user: {str(e)}")
            raise StoreError("Error registering user.") from e

        logger.info(f"Created user {db_user.id} ({username})")
        return db_user

    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> User:
        """Return the user whose stored hash matches password, else raise AuthError"""
        user = AccountService.find_by_username(db, username)

        # Unknown username, cleared password and wrong password all fail the same way
        if user is None or not user.password:
            raise AuthError()
        if not verify_password(password, user.password):
            raise AuthError()

        return user

    @staticmethod
    def list_users(db: Session) -> List[User]:
        try:
            return db.query(User).all()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error fetching users: {str(e)}")
            raise StoreError() from e

    @staticmethod
    def update_user(db: Session, user_id: int, username: str, password: Optional[str]) -> int:
        """
        Overwrite username and password of a user.

        A missing password is written as an empty string, which clears
        the stored hash and disables login for the account.
        """
        hashed_password = get_password_hash(password) if password else ""

        try:
            updated = (
                db.query(User)
                .filter(User.id == user_id)
                .update(
                    {User.username: username, User.password: hashed_password},
                    synchronize_session=False,
                )
            )
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.info(f"Update of user {user_id} refused, username taken: {username}")
            raise ConflictError() from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating user {user_id}: {str(e)}")
            raise StoreError() from e

        if updated == 0:
            raise NotFoundError("User not found")
        return user_id

    @staticmethod
    def delete_user(db: Session, user_id: int) -> None:
        try:
            deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting user {user_id}: {str(e)}")
            raise StoreError() from e

        if deleted == 0:
            raise NotFoundError("User not found")
        logger.info(f"Deleted user {user_id}")


account_service = AccountService()
