from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import AuthUser, get_current_user
from ..core.database import get_db
from ..schemas.manager import ManagerResponse, ManagerSaveRequest
from ..services.manager import ManagerService

router = APIRouter(prefix="/todos/{todo_id}/managers", tags=["managers"])


@router.post("", response_model=ManagerResponse, status_code=status.HTTP_201_CREATED)
def save_manager(
    todo_id: int,
    request: ManagerSaveRequest,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Assign a manager to a todo owned by the caller"""
    manager = ManagerService(db).save_manager(current_user, todo_id, request)
    return ManagerResponse.model_validate(manager)


@router.get("", response_model=List[ManagerResponse])
def get_managers(
    todo_id: int,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return [ManagerResponse.model_validate(m) for m in ManagerService(db).get_managers(todo_id)]


@router.delete("/{manager_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_manager(
    todo_id: int,
    manager_id: int,
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    ManagerService(db).delete_manager(current_user, todo_id, manager_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
