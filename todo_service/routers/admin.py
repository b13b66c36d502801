"""
Administrator endpoints. Every call is logged by ``log_admin_access``.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import log_admin_access
from ..core.database import get_db
from ..schemas.user import UserResponse, UserRoleChangeRequest
from ..services.comment import CommentService
from ..services.user import UserService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(log_admin_access)])


@router.patch("/users/{user_id}", response_model=UserResponse)
def change_user_role(user_id: int, request: UserRoleChangeRequest, db: Session = Depends(get_db)):
    return UserResponse.model_validate(UserService(db).change_user_role(user_id, request))


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(comment_id: int, db: Session = Depends(get_db)):
    CommentService(db).delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
