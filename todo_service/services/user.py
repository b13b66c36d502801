import logging
from sqlalchemy.orm import Session

from ..core.exceptions import InvalidRequestError, NotFoundError
from ..models.user import User, UserRole
from ..repositories.user import UserRepository
from ..schemas.user import UserChangePasswordRequest, UserRoleChangeRequest
from ..utils.security import PasswordEncoder, password_encoder

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session, encoder: PasswordEncoder = password_encoder):
        self.users = UserRepository(db)
        self.encoder = encoder

    def get_user(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def change_password(self, user_id: int, request: UserChangePasswordRequest) -> None:
        """Expects ``request.new_password`` to have passed the password policy already."""
        user = self.get_user(user_id)

        if self.encoder.matches(request.new_password, user.password):
            raise InvalidRequestError(
                "New password cannot be the same as the current password",
                {"field": "new_password"},
            )
        if not self.encoder.matches(request.old_password, user.password):
            raise InvalidRequestError("Incorrect password", {"field": "old_password"})

        user.change_password(self.encoder.encode(request.new_password))
        self.users.save()
        logger.info(f"Password changed for user id={user_id}")

    def change_user_role(self, user_id: int, request: UserRoleChangeRequest) -> User:
        user = self.get_user(user_id)
        user.update_role(UserRole.of(request.role))
        self.users.save()
        logger.info(f"Role of user id={user_id} changed to {user.user_role.value}")
        return user
