from pydantic import BaseModel, Field

from .user import UserResponse


class CommentSaveRequest(BaseModel):
    contents: str = Field(..., min_length=1)


class CommentResponse(BaseModel):
    id: int
    contents: str
    user: UserResponse

    class Config:
        from_attributes = True
