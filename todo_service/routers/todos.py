from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..clients.weather import WeatherClient, get_weather_client
from ..core.auth import AuthUser, get_current_user
from ..core.config import get_settings
from ..core.database import get_db
from ..schemas.todo import TodoList, TodoResponse, TodoSaveRequest
from ..services.todo import TodoService

settings = get_settings()

router = APIRouter(prefix="/todos", tags=["todos"])


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def save_todo(
    request: TodoSaveRequest,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    weather_client: WeatherClient = Depends(get_weather_client)
):
    """Create a todo annotated with today's weather"""
    todo = TodoService(db, weather_client).save_todo(current_user, request)
    return TodoResponse.model_validate(todo)


@router.get("", response_model=TodoList)
def get_todos(
    page: int = Query(1, ge=1, description="1-based page number"),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Page size"),
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List todos, most recently modified first"""
    result = TodoService(db).get_todos(page, size)
    return TodoList(
        todos=[TodoResponse.model_validate(todo) for todo in result.items],
        total=result.total,
        page=result.page,
        size=result.size,
        total_pages=result.total_pages,
        has_next=result.has_next
    )


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo(
    todo_id: int,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return TodoResponse.model_validate(TodoService(db).get_todo(todo_id))
