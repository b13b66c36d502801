from typing import Optional

from sqlalchemy import exists
from sqlalchemy.orm import Session

from ..models.user import User


class UserRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def exists_by_email(self, email: str) -> bool:
        return self._db.query(exists().where(User.email == email)).scalar()

    def get_by_email(self, email: str) -> Optional[User]:
        return self._db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._db.get(User, user_id)

    def add(self, user: User) -> User:
        self._db.add(user)
        self._db.commit()
        self._db.refresh(user)
        return user

    def save(self) -> None:
        self._db.commit()
