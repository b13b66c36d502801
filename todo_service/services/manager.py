import logging
from typing import List
from sqlalchemy.orm import Session

from ..core.auth import AuthUser
from ..core.exceptions import InvalidRequestError, NotFoundError
from ..models.manager import Manager
from ..repositories.manager import ManagerRepository
from ..repositories.todo import TodoRepository
from ..repositories.user import UserRepository
from ..schemas.manager import ManagerSaveRequest
from .guards import ensure_todo_owner

logger = logging.getLogger(__name__)


class ManagerService:
    def __init__(self, db: Session):
        self.todos = TodoRepository(db)
        self.users = UserRepository(db)
        self.managers = ManagerRepository(db)

    def save_manager(self, auth_user: AuthUser, todo_id: int, request: ManagerSaveRequest) -> Manager:
        todo = self.todos.get_by_id(todo_id)
        if todo is None:
            raise NotFoundError("Todo", todo_id)
        ensure_todo_owner(todo, auth_user.user_id)

        manager_user = self.users.get_by_id(request.manager_user_id)
        if manager_user is None:
            raise NotFoundError("User", request.manager_user_id)
        if manager_user.id == auth_user.user_id:
            raise InvalidRequestError(
                "The task owner cannot assign themselves as a manager",
                {"todo_id": todo_id, "manager_user_id": manager_user.id},
            )

        manager = self.managers.add(Manager(user=manager_user, todo=todo))
        logger.info(f"Manager assigned: todo_id={todo_id} user_id={manager_user.id}")
        return manager

    def get_managers(self, todo_id: int) -> List[Manager]:
        if not self.todos.count_by_id(todo_id):
            raise NotFoundError("Todo", todo_id)
        return self.managers.list_by_todo_id(todo_id)

    def delete_manager(self, auth_user: AuthUser, todo_id: int, manager_id: int) -> None:
        todo = self.todos.get_by_id(todo_id)
        if todo is None:
            raise NotFoundError("Todo", todo_id)
        ensure_todo_owner(todo, auth_user.user_id)

        manager = self.managers.get_by_id(manager_id)
        if manager is None:
            raise NotFoundError("Manager", manager_id)
        if manager.todo_id != todo.id:
            raise InvalidRequestError(
                "Manager is not assigned to this task",
                {"todo_id": todo_id, "manager_id": manager_id},
            )

        self.managers.delete(manager)
        logger.info(f"Manager removed: todo_id={todo_id} manager_id={manager_id}")
