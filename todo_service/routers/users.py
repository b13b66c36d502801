from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import AuthUser, get_current_user
from ..core.database import get_db
from ..schemas.user import UserChangePasswordRequest, UserResponse
from ..services.user import UserService
from ..utils.password_policy import validate_new_password

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return UserResponse.model_validate(UserService(db).get_user(user_id))


@router.put("")
def change_password(
    request: UserChangePasswordRequest,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change the caller's password"""
    validate_new_password(request.new_password)
    UserService(db).change_password(current_user.user_id, request)
    return {"message": "Password changed"}
