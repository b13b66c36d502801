import pytest

from todo_service.core.exceptions import AuthError, InvalidRequestError
from todo_service.models import User, UserRole
from todo_service.schemas.auth import SigninRequest, SignupRequest
from todo_service.services.auth import AuthService


class SpyEncoder:
    """Wraps a real encoder and records calls to ``encode``."""

    def __init__(self, encoder):
        self.encoder = encoder
        self.encoded = []

    def encode(self, raw_password):
        self.encoded.append(raw_password)
        return self.encoder.encode(raw_password)

    def matches(self, raw_password, encoded_password):
        return self.encoder.matches(raw_password, encoded_password)


@pytest.fixture
def spy(fast_encoder):
    return SpyEncoder(fast_encoder)


class TestSignup:
    def test_stores_hash_not_password(self, db_session, spy):
        AuthService(db_session, spy).signup(SignupRequest(email="ann@example.com", password="Secret123"))

        user = db_session.query(User).filter(User.email == "ann@example.com").one()
        assert user.password != "Secret123"
        assert spy.matches("Secret123", user.password)
        assert user.user_role == UserRole.USER

    def test_duplicate_email_is_rejected_before_hashing(self, db_session, spy):
        service = AuthService(db_session, spy)
        service.signup(SignupRequest(email="ann@example.com", password="Secret123"))

        with pytest.raises(InvalidRequestError):
            service.signup(SignupRequest(email="ann@example.com", password="Other123"))

        assert spy.encoded == ["Secret123"]

    def test_unknown_role_is_rejected_before_hashing(self, db_session, spy):
        with pytest.raises(InvalidRequestError):
            AuthService(db_session, spy).signup(
                SignupRequest(email="ann@example.com", password="Secret123", user_role="ROOT")
            )

        assert spy.encoded == []
        assert db_session.query(User).count() == 0


class TestSignin:
    def test_wrong_password(self, db_session, spy):
        service = AuthService(db_session, spy)
        service.signup(SignupRequest(email="ann@example.com", password="Secret123"))

        with pytest.raises(AuthError):
            service.signin(SigninRequest(email="ann@example.com", password="Secret124"))

    def test_token_for_registered_user(self, db_session, spy):
        service = AuthService(db_session, spy)
        service.signup(SignupRequest(email="ann@example.com", password="Secret123", user_role="admin"))

        assert service.signin(SigninRequest(email="ann@example.com", password="Secret123")).startswith("Bearer ")
