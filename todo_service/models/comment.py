from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..core.database import Base
from .todo import utcnow


class Comment(Base):
    """Comment left by a user on a todo"""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    contents = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    todo_id = Column(Integer, ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    modified_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User")
    todo = relationship("Todo", back_populates="comments")

    def __repr__(self):
        return f"<Comment(id={self.id}, todo_id={self.todo_id}, user_id={self.user_id})>"
