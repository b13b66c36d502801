from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.auth import AuthUser, get_current_user
from ..core.database import get_db
from ..schemas.comment import CommentResponse, CommentSaveRequest
from ..services.comment import CommentService

router = APIRouter(prefix="/todos/{todo_id}/comments", tags=["comments"])


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def save_comment(
    todo_id: int,
    request: CommentSaveRequest,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    comment = CommentService(db).save_comment(current_user, todo_id, request)
    return CommentResponse.model_validate(comment)


@router.get("", response_model=List[CommentResponse])
def get_comments(
    todo_id: int,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return [CommentResponse.model_validate(c) for c in CommentService(db).get_comments(todo_id)]
