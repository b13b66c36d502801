from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True


class UserChangePasswordRequest(BaseModel):
    old_password: str = Field(..., min_length=1)
    # Policy rules are checked by utils.password_policy at the endpoint
    new_password: str


class UserRoleChangeRequest(BaseModel):
    role: str = Field(..., min_length=1)
