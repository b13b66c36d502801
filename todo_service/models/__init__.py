"""Database models for Todo Service."""
from .user import User, UserRole
from .todo import Todo
from .manager import Manager
from .comment import Comment

__all__ = ["User", "UserRole", "Todo", "Manager", "Comment"]
