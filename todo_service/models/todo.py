from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo(Base):
    """Todo model for database"""
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    contents = Column(Text, nullable=False)
    weather = Column(String(100), nullable=True)

    # Owner; cleared when the user row goes away
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    user = relationship("User")

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    modified_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False, index=True)

    managers = relationship("Manager", back_populates="todo", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="todo", cascade="all, delete-orphan")

    def __init__(self, title: str, contents: str, weather: str, user, **kwargs):
        super().__init__(title=title, contents=contents, weather=weather, user=user, **kwargs)
        # The creator is the first manager of every owned todo
        from .manager import Manager
        if user is not None:
            self.managers.append(Manager(user=user))

    def __repr__(self):
        return f"<Todo(id={self.id}, title='{self.title}', user_id={self.user_id})>"
