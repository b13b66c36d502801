from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class PasswordEncoder:
    """
    One-way password encoding and verification.

    ``matches`` takes the raw password first and the stored hash second. A
    second argument that is not a recognised hash raises ``ValueError`` so a
    swapped call fails loudly instead of quietly returning ``False``.
    """

    def __init__(self, context: CryptContext = pwd_context):
        self._context = context

    def encode(self, raw_password: str) -> str:
        return self._context.hash(raw_password)

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        if not encoded_password or self._context.identify(encoded_password) is None:
            raise ValueError("encoded_password is not a recognised password hash")
        return self._context.verify(raw_password, encoded_password)


password_encoder = PasswordEncoder()
