from pydantic import BaseModel

from .user import UserResponse


class ManagerSaveRequest(BaseModel):
    manager_user_id: int


class ManagerResponse(BaseModel):
    id: int
    user: UserResponse

    class Config:
        from_attributes = True
