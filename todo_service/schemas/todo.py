"""
Pydantic schemas for todos.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from .user import UserResponse


class TodoSaveRequest(BaseModel):
    """Schema for creating a todo"""
    title: str = Field(..., min_length=1, max_length=200, description="Todo title")
    contents: str = Field(..., min_length=1, description="Todo contents")


class TodoResponse(BaseModel):
    """Schema for todo response"""
    id: int = Field(..., description="Todo ID")
    title: str
    contents: str
    weather: Optional[str] = Field(None, description="Weather on the day the todo was created")
    user: Optional[UserResponse] = Field(None, description="Owner, absent if the user no longer exists")
    created_at: datetime
    modified_at: datetime

    class Config:
        from_attributes = True


class TodoList(BaseModel):
    """Schema for paginated todo list"""
    todos: List[TodoResponse] = Field(..., description="List of todos")
    total: int = Field(..., description="Total number of todos")
    page: int = Field(..., description="1-based page number")
    size: int = Field(..., description="Page size")
    total_pages: int = Field(..., description="Number of pages")
    has_next: bool = Field(..., description="Whether there are more todos")
