"""
Preconditions checked before a dependent record is written against a todo.
"""
from ..core.exceptions import InvalidRequestError
from ..models.todo import Todo


def ensure_todo_has_owner(todo: Todo) -> Todo:
    """Raise a caller-fault error when the todo's owner is absent or no longer exists."""
    if todo.user is None:
        raise InvalidRequestError(
            "invalid request: task has no valid owner",
            {"todo_id": todo.id},
        )
    return todo


def ensure_todo_owner(todo: Todo, user_id: int) -> Todo:
    """Raise unless ``user_id`` owns the todo."""
    ensure_todo_has_owner(todo)
    if todo.user.id != user_id:
        raise InvalidRequestError(
            "Only the user who created the task can change its managers",
            {"todo_id": todo.id, "user_id": user_id},
        )
    return todo
