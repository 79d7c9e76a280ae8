# usuarios_api/core/security.py
from fastapi import Request
from passlib.context import CryptContext

from usuarios_api.core.exceptions import ValidationError

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """
    One-way salted password hashing (bcrypt).

    The work factor is fixed when the hasher is built and used for every
    hash, both on create and on password-changing update. Passwords longer
    than bcrypt's 72-byte input are rejected instead of silently truncated.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )

    def hash(self, plain_password: str) -> str:
        if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Senha deve ter no máximo {MAX_PASSWORD_BYTES} bytes."
            )
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, password_hash: str) -> bool:
        # no stored hash can come from a longer password
        if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return False
        # passlib compares digests in constant time
        return self._context.verify(plain_password, password_hash)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher
