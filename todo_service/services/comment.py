import logging
from typing import List
from sqlalchemy.orm import Session

from ..core.auth import AuthUser
from ..core.exceptions import NotFoundError
from ..models.comment import Comment
from ..repositories.comment import CommentRepository
from ..repositories.todo import TodoRepository
from ..repositories.user import UserRepository
from ..schemas.comment import CommentSaveRequest
from .guards import ensure_todo_has_owner

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, db: Session):
        self.todos = TodoRepository(db)
        self.users = UserRepository(db)
        self.comments = CommentRepository(db)

    def save_comment(self, auth_user: AuthUser, todo_id: int, request: CommentSaveRequest) -> Comment:
        todo = self.todos.get_by_id(todo_id)
        if todo is None:
            raise NotFoundError("Todo", todo_id)
        ensure_todo_has_owner(todo)

        user = self.users.get_by_id(auth_user.user_id)
        if user is None:
            raise NotFoundError("User", auth_user.user_id)

        return self.comments.add(Comment(contents=request.contents, user=user, todo=todo))

    def get_comments(self, todo_id: int) -> List[Comment]:
        if not self.todos.count_by_id(todo_id):
            raise NotFoundError("Todo", todo_id)
        return self.comments.list_by_todo_id(todo_id)

    def delete_comment(self, comment_id: int) -> None:
        comment = self.comments.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        self.comments.delete(comment)
        logger.info(f"Comment deleted by admin: id={comment_id}")
