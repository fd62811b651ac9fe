from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.core.database import Base


class User(Base):
    """
    Account that can log in with a username and password.

    The password column holds a bcrypt hash (salt and cost embedded),
    or an empty string after an update that did not supply a password.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Usernames are checked for existence before insert; the unique index catches races
    username = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
