from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from ..models.comment import Comment


class CommentRepository:
    """Comments of a todo, each with its author loaded by the same query."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def list_by_todo_id(self, todo_id: int) -> List[Comment]:
        return (
            self._db.query(Comment)
            .options(joinedload(Comment.user))
            .filter(Comment.todo_id == todo_id)
            .order_by(Comment.id)
            .all()
        )

    def get_by_id(self, comment_id: int) -> Optional[Comment]:
        return self._db.get(Comment, comment_id)

    def add(self, comment: Comment) -> Comment:
        self._db.add(comment)
        self._db.commit()
        self._db.refresh(comment)
        return comment

    def delete(self, comment: Comment) -> None:
        self._db.delete(comment)
        self._db.commit()
