import logging
from sqlalchemy.orm import Session

from ..core.exceptions import AuthError, InvalidRequestError
from ..core.jwt_handler import create_bearer_token
from ..models.user import User, UserRole
from ..repositories.user import UserRepository
from ..schemas.auth import SigninRequest, SignupRequest
from ..utils.security import PasswordEncoder, password_encoder

logger = logging.getLogger(__name__)


class AuthService:
    """Signup and signin; both return a bearer token."""

    def __init__(self, db: Session, encoder: PasswordEncoder = password_encoder):
        self.users = UserRepository(db)
        self.encoder = encoder

    def signup(self, request: SignupRequest) -> str:
        # Reject before hashing
        if self.users.exists_by_email(request.email):
            raise InvalidRequestError("Email already registered", {"field": "email"})
        user_role = UserRole.of(request.user_role)

        user = User(
            email=request.email,
            password=self.encoder.encode(request.password),
            user_role=user_role,
        )
        self.users.add(user)
        logger.info(f"User registered: id={user.id} role={user.user_role.value}")
        return create_bearer_token(user.id, user.email, user.user_role.value)

    def signin(self, request: SigninRequest) -> str:
        user = self.users.get_by_email(request.email)
        if user is None:
            raise InvalidRequestError("User is not registered", {"field": "email"})
        if not self.encoder.matches(request.password, user.password):
            logger.info(f"Failed signin for user id={user.id}")
            raise AuthError("Incorrect password")
        return create_bearer_token(user.id, user.email, user.user_role.value)
