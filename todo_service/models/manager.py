from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from ..core.database import Base


class Manager(Base):
    """A user granted management rights on a todo"""
    __tablename__ = "managers"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    todo_id = Column(Integer, ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship("User")
    todo = relationship("Todo", back_populates="managers")

    def __repr__(self):
        return f"<Manager(id={self.id}, user_id={self.user_id}, todo_id={self.todo_id})>"
