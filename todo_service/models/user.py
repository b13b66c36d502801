import enum
from sqlalchemy import Column, Integer, String, Enum, DateTime
from sqlalchemy.sql import func

from ..core.database import Base
from ..core.exceptions import InvalidRequestError


class UserRole(str, enum.Enum):
    """User role enumeration"""
    ADMIN = "ADMIN"
    USER = "USER"

    @classmethod
    def of(cls, role: str) -> "UserRole":
        """Parse a role name case-insensitively."""
        for member in cls:
            if member.value == (role or "").upper():
                return member
        raise InvalidRequestError(f"Invalid user role: {role}", {"field": "user_role"})


class User(Base):
    """User model for database"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    user_role = Column(Enum(UserRole), default=UserRole.USER, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def change_password(self, encoded_password: str):
        self.password = encoded_password

    def update_role(self, user_role: UserRole):
        self.user_role = user_role

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.user_role}')>"
