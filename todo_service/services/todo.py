import logging
from typing import Optional
from sqlalchemy.orm import Session

from ..clients.weather import WeatherClient
from ..core.auth import AuthUser
from ..core.exceptions import NotFoundError
from ..models.todo import Todo
from ..repositories.todo import TodoPage, TodoRepository
from ..repositories.user import UserRepository
from ..schemas.todo import TodoSaveRequest

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, db: Session, weather_client: Optional[WeatherClient] = None):
        self.todos = TodoRepository(db)
        self.users = UserRepository(db)
        self.weather_client = weather_client

    def save_todo(self, auth_user: AuthUser, request: TodoSaveRequest) -> Todo:
        user = self.users.get_by_id(auth_user.user_id)
        if user is None:
            raise NotFoundError("User", auth_user.user_id)

        weather = self.weather_client.get_today_weather()

        todo = self.todos.add(Todo(
            title=request.title,
            contents=request.contents,
            weather=weather,
            user=user,
        ))
        logger.info(f"Todo created: id={todo.id} user_id={user.id}")
        return todo

    def get_todos(self, page: int, size: int) -> TodoPage:
        return self.todos.list_ordered_by_recency(page, size)

    def get_todo(self, todo_id: int) -> Todo:
        todo = self.todos.get_by_id(todo_id)
        if todo is None:
            raise NotFoundError("Todo", todo_id)
        return todo
